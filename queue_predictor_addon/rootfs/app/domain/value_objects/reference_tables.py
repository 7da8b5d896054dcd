"""Reference tables value objects.

Fixed enumerations shared by the prediction engine and the presentation
layer (zones, technologies, study phases, counties).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PhaseDefinition:
    """A study phase of the interconnection process.

    Attributes:
        label: Human-readable phase name
        short: Short code used in charts
        value: Ordinal position (0 = screening started, 4 = IA signed)
    """

    label: str
    short: str
    value: int


ZONES: tuple[str, ...] = (
    "WEST",
    "PANHANDLE",
    "NORTH",
    "SOUTH",
    "HOUSTON",
    "EAST",
    "COAST",
)

TECHNOLOGIES: tuple[str, ...] = ("Solar", "Wind", "Battery", "Hybrid", "Gas", "Other")

PHASES: tuple[PhaseDefinition, ...] = (
    PhaseDefinition(label="Screening Started", short="SCR", value=0),
    PhaseDefinition(label="Screening Complete", short="SS", value=1),
    PhaseDefinition(label="FIS In Progress", short="FIS", value=2),
    PhaseDefinition(label="FIS Complete", short="FISC", value=3),
    PhaseDefinition(label="IA Signed", short="IA", value=4),
)

# Presentation only; the engine never reads counties.
COUNTIES: tuple[str, ...] = (
    "Glasscock", "Pecos", "Reagan", "Upton", "Midland", "Ector", "Andrews",
    "Winkler", "Ward", "Reeves", "Lubbock", "Taylor", "Nolan", "Mitchell",
    "Webb", "Maverick", "Travis", "Bexar", "Harris", "McLennan", "Other",
)


def get_phase_label(phase: int) -> str:
    """Return the label of a phase ordinal, or an empty string if unknown."""
    for definition in PHASES:
        if definition.value == phase:
            return definition.label
    return ""
