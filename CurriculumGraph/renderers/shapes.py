from dataclasses import dataclass

from CurriculumGraph.curriculum.models import Position


@dataclass(frozen=True)
class Circle:
    id: str
    label: str
    tooltip: str
    position: Position
    fill_color: str
    border_color: str
    text_color: str


@dataclass(frozen=True)
class Diamond:
    id: str
    position: Position
    border_color: str


@dataclass(frozen=True)
class Joint:
    """Invisible bend point an arrow is routed through."""

    id: str
    position: Position


@dataclass(frozen=True)
class Arrow:
    id: str
    from_id: str
    to_id: str
    color: str
