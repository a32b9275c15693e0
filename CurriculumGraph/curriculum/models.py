from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Status:
    """A state a subject can be in. Its rank is its index in the scale."""

    id: str
    name: str
    color: str
    text_color: str = "#FFFFFF"
    leaf_text_color: Optional[str] = None


@dataclass(frozen=True)
class Availability:
    """A tier of how unlocked a node is. Its rank is its index in the scale."""

    id: str
    name: str
    color: str


@dataclass
class DependencyGroup:
    """Every subject in ``subject_ids`` must be at least at ``required_status``."""

    required_status: str
    subject_ids: List[str] = field(default_factory=list)


@dataclass
class PrerequisiteTier:
    """Dependency groups that must all hold to reach ``availability_id``."""

    availability_id: str
    dependency_groups: List[DependencyGroup] = field(default_factory=list)


@dataclass
class Subject:
    id: str
    name: str
    short_name: str
    position: Position = field(default_factory=Position)
    status: str = ""
    prerequisites: List[PrerequisiteTier] = field(default_factory=list)

    def prerequisite_ids(self) -> List[str]:
        """All subject ids named in any tier, in declaration order."""
        return [
            subject_id
            for tier in self.prerequisites
            for group in tier.dependency_groups
            for subject_id in group.subject_ids
        ]


@dataclass
class Connector:
    id: str
    position: Position = field(default_factory=Position)
    dependency_ids: List[str] = field(default_factory=list)
    target_ids: List[str] = field(default_factory=list)


class Scales:
    """
    The ordered status and availability scales of one curriculum.

    Only positions matter for comparisons. Unknown ids resolve to the lowest
    entry of the respective scale.
    """

    def __init__(self, statuses, availabilities):
        if not statuses:
            raise ValueError("The status scale needs at least one entry.")
        if not availabilities:
            raise ValueError("The availability scale needs at least one entry.")

        self.statuses: List[Status] = list(statuses)
        self.availabilities: List[Availability] = list(availabilities)
        self._status_rank = {}
        for index, status in enumerate(self.statuses):
            self._status_rank.setdefault(status.id, index)
        self._availability_rank = {}
        for index, availability in enumerate(self.availabilities):
            self._availability_rank.setdefault(availability.id, index)

    @property
    def lowest_status(self) -> Status:
        return self.statuses[0]

    @property
    def lowest_availability(self) -> Availability:
        return self.availabilities[0]

    @property
    def highest_availability(self) -> Availability:
        return self.availabilities[-1]

    def has_status(self, status_id) -> bool:
        return status_id in self._status_rank

    def status_rank(self, status_id) -> int:
        return self._status_rank.get(status_id, 0)

    def availability_rank(self, availability_id) -> int:
        return self._availability_rank.get(availability_id, 0)

    def status(self, status_id) -> Status:
        return self.statuses[self.status_rank(status_id)]

    def availability(self, availability_id) -> Availability:
        return self.availabilities[self.availability_rank(availability_id)]

    def next_status(self, status_id) -> Status:
        """The status after ``status_id``, wrapping to the first after the last."""
        return self.statuses[(self.status_rank(status_id) + 1) % len(self.statuses)]

    def lowest_of(self, availabilities) -> Availability:
        return min(availabilities, key=lambda a: self.availability_rank(a.id))


@dataclass
class Variant:
    """One curriculum: its scales plus the records the graph is built from."""

    name: str
    scales: Scales
    subjects: List[Subject] = field(default_factory=list)
    connectors: List[Connector] = field(default_factory=list)
