from abc import ABC, abstractmethod

from CurriculumGraph.renderers.shapes import Arrow, Circle, Diamond, Joint


class Renderer(ABC):
    """
    Drawing capabilities the graph emits instructions to.

    The graph draws every shape before any arrow, so implementations can
    resolve arrow endpoints by id.
    """

    @abstractmethod
    def draw_circle(self, circle: Circle) -> None:
        pass

    @abstractmethod
    def draw_diamond(self, diamond: Diamond) -> None:
        pass

    @abstractmethod
    def draw_invisible_joint(self, joint: Joint) -> None:
        pass

    @abstractmethod
    def draw_arrow(self, arrow: Arrow) -> None:
        pass
