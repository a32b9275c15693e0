from dataclasses import asdict
from typing import Any, Dict, List

from CurriculumGraph.renderers.base import Renderer
from CurriculumGraph.renderers.shapes import Arrow, Circle, Diamond, Joint


class RecordingRenderer(Renderer):
    """Keeps every draw instruction so it can be inspected or serialised."""

    def __init__(self):
        self.circles: List[Circle] = []
        self.diamonds: List[Diamond] = []
        self.joints: List[Joint] = []
        self.arrows: List[Arrow] = []

    def draw_circle(self, circle):
        self.circles.append(circle)

    def draw_diamond(self, diamond):
        self.diamonds.append(diamond)

    def draw_invisible_joint(self, joint):
        self.joints.append(joint)

    def draw_arrow(self, arrow):
        self.arrows.append(arrow)

    def arrow(self, arrow_id):
        return next((a for a in self.arrows if a.id == arrow_id), None)

    def circle(self, circle_id):
        return next((c for c in self.circles if c.id == circle_id), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "circles": [asdict(c) for c in self.circles],
            "diamonds": [asdict(d) for d in self.diamonds],
            "joints": [asdict(j) for j in self.joints],
            "arrows": [asdict(a) for a in self.arrows],
        }
