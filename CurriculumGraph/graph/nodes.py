import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

import networkx as nx

from CurriculumGraph.graph.links import contributed_availability
from CurriculumGraph.graph.traversal import (
    add_dependency,
    all_reachable_subject_ids,
    reachable_subject_satisfies,
)
from CurriculumGraph.renderers.shapes import Arrow, Circle, Diamond, Joint

logger = logging.getLogger(__name__)


class Node(ABC):
    """
    A vertex of the curriculum graph.

    References point from a node to the nodes it depends on. ``dependencies``
    holds every wired reference and answers satisfaction queries; ``links``
    starts as the same references and is pruned by transitive reduction, it
    only decides which arrows are drawn. ``wiring`` mirrors ``dependencies``
    as edges node -> dependency and is shared by every node of a graph.
    """

    def __init__(self, scales):
        self.scales = scales
        self.wiring = nx.DiGraph()
        self.wiring.add_node(self)
        self.dependencies: Dict["Node", None] = {}
        self.links: Dict["Node", None] = {}
        self.is_leaf = True

    @property
    @abstractmethod
    def id(self) -> str:
        pass

    @property
    def subject_id(self) -> Optional[str]:
        return None

    @abstractmethod
    def resolve_references(self, graph):
        """Turn declared ids into references once every node exists."""

    @abstractmethod
    def get_availability(self, scope=None, visited=None):
        pass

    @abstractmethod
    def requirements_at(self, availability_id, visited=None) -> List[Tuple[str, str]]:
        """(subject id, required status) pairs asked for at one tier."""

    @abstractmethod
    def draw_node(self, renderer):
        pass

    def satisfies(self, subject_id, status_id, visited=None) -> bool:
        return reachable_subject_satisfies(self, subject_id, status_id, visited)

    def toggle_status(self) -> bool:
        return False

    def draw_links(self, renderer):
        for dependency in self.links:
            availability = contributed_availability(dependency, self)
            renderer.draw_arrow(
                Arrow(
                    id=f"{dependency.id}-{self.id}",
                    from_id=dependency.id,
                    to_id=self.id,
                    color=availability.color,
                )
            )

    def __repr__(self):
        return f"{type(self).__name__}({self.id!r})"


class SubjectNode(Node):
    """A course with a status and tiered prerequisites."""

    def __init__(self, scales, subject):
        super().__init__(scales)
        self.subject = subject
        if not scales.has_status(subject.status):
            logger.warning(
                f"Subject {subject.id} has unknown status {subject.status!r}, "
                f"using {scales.lowest_status.id!r}"
            )

    @property
    def id(self):
        return self.subject.id

    @property
    def subject_id(self):
        return self.subject.id

    @property
    def status(self):
        return self.scales.status(self.subject.status)

    def resolve_references(self, graph):
        for subject_id in self.subject.prerequisite_ids():
            node = graph.get_node(subject_id)
            if node is None:
                logger.warning(
                    f"Prerequisite {subject_id} of subject {self.id} "
                    "not found in graph."
                )
                continue
            add_dependency(self, node)

    def satisfies(self, subject_id, status_id, visited=None):
        if self.subject.id == subject_id:
            return self.scales.status_rank(
                self.subject.status
            ) >= self.scales.status_rank(status_id)
        return super().satisfies(subject_id, status_id, visited)

    def _tiers_at(self, availability_id):
        return [
            tier
            for tier in self.subject.prerequisites
            if self.scales.availability(tier.availability_id).id == availability_id
        ]

    def requirements_at(self, availability_id, visited=None):
        return [
            (subject_id, group.required_status)
            for tier in self._tiers_at(availability_id)
            for group in tier.dependency_groups
            for subject_id in group.subject_ids
        ]

    def get_availability(self, scope=None, visited=None):
        """
        Highest tier reached, evaluated cumulatively in scale order.

        Only requirements on subjects inside ``scope`` are checked; by default
        that is everything upstream of this subject. A tier cannot be reached
        while an earlier one is unmet.
        """
        if scope is None:
            scope = all_reachable_subject_ids(self)

        reached = self.scales.lowest_availability
        for availability in self.scales.availabilities:
            met = all(
                self.satisfies(subject_id, group.required_status)
                for tier in self._tiers_at(availability.id)
                for group in tier.dependency_groups
                for subject_id in group.subject_ids
                if subject_id in scope
            )
            if not met:
                break
            reached = availability
        return reached

    def toggle_status(self):
        """Advance to the next status, wrapping. True if the status changed."""
        previous = self.subject.status
        self.subject.status = self.scales.next_status(previous).id
        logger.debug(f"Subject {self.id}: {previous} -> {self.subject.status}")
        return self.subject.status != previous

    def draw_node(self, renderer):
        status = self.status
        text_color = status.text_color
        if self.is_leaf and status.leaf_text_color:
            text_color = status.leaf_text_color

        renderer.draw_circle(
            Circle(
                id=self.subject.id,
                label=self.subject.short_name,
                tooltip=self.subject.name,
                position=self.subject.position,
                fill_color=status.color,
                border_color=self.get_availability().color,
                text_color=text_color,
            )
        )


class ConnectorNode(Node):
    """A many-to-many junction routing sources into targets. It has no status."""

    def __init__(self, scales, connector):
        super().__init__(scales)
        self.connector = connector
        self.targets: List[Node] = []

    @property
    def id(self):
        return self.connector.id

    def resolve_references(self, graph):
        for dependency_id in self.connector.dependency_ids:
            node = graph.get_node(dependency_id)
            if node is None:
                logger.warning(
                    f"Connector dependency {dependency_id} of {self.id} "
                    "not found in graph."
                )
                continue
            add_dependency(self, node)

        for target_id in self.connector.target_ids:
            node = graph.get_node(target_id)
            if node is None:
                logger.warning(
                    f"Connector target {target_id} of {self.id} not found in graph."
                )
                continue
            if node not in self.targets:
                self.targets.append(node)
            add_dependency(node, self)

    def requirements_at(self, availability_id, visited=None):
        if visited is None:
            visited = set()
        if self in visited:
            return []
        visited.add(self)
        return [
            requirement
            for target in self.targets
            for requirement in target.requirements_at(availability_id, visited)
        ]

    def get_availability(self, scope=None, visited=None):
        """
        The lowest availability among the direct targets.

        A connector is only as available as the least available thing it
        feeds. One already under evaluation (a connector cycle) and one
        without targets do not lower the minimum.
        """
        if scope is None:
            scope = all_reachable_subject_ids(self)
        if visited is None:
            visited = set()
        if self in visited or not self.targets:
            return self.scales.highest_availability
        visited.add(self)

        return self.scales.lowest_of(
            target.get_availability(scope, visited) for target in self.targets
        )

    @property
    def is_joint(self) -> bool:
        """One source feeding one existing target only routes an arrow."""
        return len(self.connector.dependency_ids) == 1 and len(self.targets) == 1

    def draw_node(self, renderer):
        if self.is_joint:
            renderer.draw_invisible_joint(
                Joint(id=self.connector.id, position=self.connector.position)
            )
            return

        renderer.draw_diamond(
            Diamond(
                id=self.connector.id,
                position=self.connector.position,
                border_color=self.get_availability().color,
            )
        )
