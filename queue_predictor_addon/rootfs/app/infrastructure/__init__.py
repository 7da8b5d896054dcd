"""Infrastructure layer for the interconnection queue predictor.

This package contains implementations of domain interfaces
and the external surfaces of the service (in-memory history, HTTP API).
"""
