from CurriculumGraph.curriculum.models import (
    Availability,
    Connector,
    DependencyGroup,
    Position,
    PrerequisiteTier,
    Scales,
    Status,
    Subject,
    Variant,
)

__all__ = [
    "Availability",
    "Connector",
    "DependencyGroup",
    "Position",
    "PrerequisiteTier",
    "Scales",
    "Status",
    "Subject",
    "Variant",
]
