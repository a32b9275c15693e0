from CurriculumGraph.renderers.base import Renderer
from CurriculumGraph.renderers.networkx_renderer import NetworkxRenderer
from CurriculumGraph.renderers.recording_renderer import RecordingRenderer
from CurriculumGraph.renderers.shapes import Arrow, Circle, Diamond, Joint

__all__ = [
    "Arrow",
    "Circle",
    "Diamond",
    "Joint",
    "NetworkxRenderer",
    "RecordingRenderer",
    "Renderer",
]
