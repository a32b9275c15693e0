import logging

import networkx as nx

from CurriculumGraph.renderers.base import Renderer

logger = logging.getLogger(__name__)


class NetworkxRenderer(Renderer):
    """
    Renders the curriculum into a ``networkx.DiGraph``.

    Node attributes carry the shape kind, position and colours; edges carry
    the arrow colour. GraphML only stores scalars, so positions are split
    into ``x`` and ``y``.
    """

    def __init__(self):
        self.graph = nx.DiGraph()

    def draw_circle(self, circle):
        self.graph.add_node(
            circle.id,
            kind="subject",
            label=circle.label,
            tooltip=circle.tooltip,
            x=float(circle.position.x),
            y=float(circle.position.y),
            fill_color=circle.fill_color,
            border_color=circle.border_color,
            text_color=circle.text_color,
        )

    def draw_diamond(self, diamond):
        self.graph.add_node(
            diamond.id,
            kind="connector",
            x=float(diamond.position.x),
            y=float(diamond.position.y),
            border_color=diamond.border_color,
        )

    def draw_invisible_joint(self, joint):
        self.graph.add_node(
            joint.id,
            kind="joint",
            x=float(joint.position.x),
            y=float(joint.position.y),
        )

    def draw_arrow(self, arrow):
        if arrow.from_id not in self.graph or arrow.to_id not in self.graph:
            logger.warning(
                f"Skipping arrow {arrow.id}: endpoint was never drawn "
                f"({arrow.from_id} -> {arrow.to_id})"
            )
            return
        self.graph.add_edge(arrow.from_id, arrow.to_id, id=arrow.id, color=arrow.color)

    def write_graphml(self, path):
        nx.write_graphml(self.graph, path)
        logger.debug(f"GraphML written to {path}")
        return path
