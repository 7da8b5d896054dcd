"""Domain layer for the interconnection queue predictor.

This package contains the core business logic for queue predictions,
following Domain-Driven Design (DDD) principles.

The domain layer is pure Python with no external dependencies on
Flask or any infrastructure concerns.
"""
