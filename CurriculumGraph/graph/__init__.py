from CurriculumGraph.graph.curriculum_graph import Graph
from CurriculumGraph.graph.nodes import ConnectorNode, Node, SubjectNode

__all__ = ["ConnectorNode", "Graph", "Node", "SubjectNode"]
