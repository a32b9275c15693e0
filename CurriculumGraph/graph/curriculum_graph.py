import logging
from typing import Dict, List, Optional

import networkx as nx

from CurriculumGraph.graph.nodes import ConnectorNode, Node, SubjectNode
from CurriculumGraph.graph.traversal import mark_leaves, simplify

logger = logging.getLogger(__name__)


class Graph:
    """
    Curriculum dependency graph.

    Construction creates one node per subject and connector, wires their
    references, reduces every node's drawn links and finally marks leaves.
    Reduction needs the complete wiring and leaf marking needs the reduced
    links, so the three passes run in that order. Nodes are never added or
    removed afterwards; only subject statuses change.

    ``wiring`` holds every wired reference as an edge node -> dependency and
    answers the reachability questions of the reduction and of scoping.
    """

    def __init__(self, scales, subjects, connectors=()):
        self.scales = scales
        self.wiring = nx.DiGraph()
        self._nodes: Dict[str, Node] = {}

        for subject in subjects:
            self._add_node(SubjectNode(scales, subject))
        for connector in connectors:
            self._add_node(ConnectorNode(scales, connector))

        for node in self._nodes.values():
            node.resolve_references(self)
        for node in self._nodes.values():
            simplify(node)
        for node in self._nodes.values():
            mark_leaves(node)

        logger.debug(f"Graph built with {len(self._nodes)} nodes")

    def _add_node(self, node):
        if node.id in self._nodes:
            logger.warning(f"Node with ID {node.id} already exists in the graph.")
            return
        self._nodes[node.id] = node
        node.wiring = self.wiring
        self.wiring.add_node(node)

    def get_node(self, node_id) -> Optional[Node]:
        return self._nodes.get(node_id)

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def subject_nodes(self) -> List[SubjectNode]:
        return [n for n in self._nodes.values() if isinstance(n, SubjectNode)]

    def __len__(self):
        return len(self._nodes)

    def __contains__(self, node_id):
        return node_id in self._nodes

    def render(self, renderer):
        """Draw every shape first, then every arrow between them."""
        for node in self._nodes.values():
            node.draw_node(renderer)
        for node in self._nodes.values():
            node.draw_links(renderer)

    def toggle_status(self, node_id) -> bool:
        """
        Advance a subject to its next status.

        Returns True when the graph has to be rendered again. Connectors and
        unknown ids are left alone.
        """
        node = self.get_node(node_id)
        if node is None:
            logger.warning(f"Cannot toggle status of unknown node {node_id}.")
            return False
        return node.toggle_status()
