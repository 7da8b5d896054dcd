"""Project submission value object.

Immutable data structure for a project submitted through the web form.
"""

from dataclasses import dataclass

from .project_features import ProjectFeatures
from .reference_tables import COUNTIES, PHASES, TECHNOLOGIES, ZONES


@dataclass(frozen=True)
class ProjectSubmission:
    """A project as entered by an analyst.

    Wraps the engine features with presentation-only fields and enforces
    the ranges offered by the input form.

    Attributes:
        features: Engine input features
        project_name: Free-form project name (optional)
        county: County the project is sited in
    """

    features: ProjectFeatures
    project_name: str = ""
    county: str = "Glasscock"

    def __post_init__(self) -> None:
        """Validate submission values."""
        f = self.features
        if not 1 <= f.capacity <= 999:
            raise ValueError(f"capacity must be between 1 and 999, got {f.capacity}")
        if not 1 <= f.poi_count <= 50:
            raise ValueError(f"poi_count must be between 1 and 50, got {f.poi_count}")
        if not 0 <= f.days_in_queue <= 1825:
            raise ValueError(
                f"days_in_queue must be between 0 and 1825, got {f.days_in_queue}"
            )
        if not 0.0 <= f.firm_capacity <= 1.0:
            raise ValueError(
                f"firm_capacity must be between 0.0 and 1.0, got {f.firm_capacity}"
            )
        if f.phase not in {p.value for p in PHASES}:
            raise ValueError(f"phase must be between 0 and 4, got {f.phase}")
        if f.tech_type not in TECHNOLOGIES:
            raise ValueError(f"tech_type must be one of {TECHNOLOGIES}, got {f.tech_type}")
        if f.zone not in ZONES:
            raise ValueError(f"zone must be one of {ZONES}, got {f.zone}")
        if self.county not in COUNTIES:
            raise ValueError(f"county must be one of {COUNTIES}, got {self.county}")

    @property
    def display_name(self) -> str:
        """Project name as shown in run lists."""
        return self.project_name or "Unnamed"

    def to_dict(self) -> dict:
        """Serialize the submission with form field names."""
        return {
            "projectName": self.project_name,
            "county": self.county,
            **self.features.to_dict(),
        }
