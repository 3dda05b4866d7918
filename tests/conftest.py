import pytest

from softraster.math3d import Vec3
from softraster.mesh import Triangle


class RecordingSurface:
    """Drawing surface that only records the calls it receives."""

    def __init__(self, width=100, height=100):
        self.width = width
        self.height = height
        self.calls = []
        self.size_queries = 0

    def size(self):
        self.size_queries += 1
        return self.width, self.height

    def clear(self, color):
        self.calls.append(("clear", color))

    def fill_triangle(self, a, b, c, color):
        self.calls.append(("fill", (a, b, c), color))

    def draw_line(self, a, b, color):
        self.calls.append(("line", (a, b), color))

    def draw_circle(self, center, radius, color):
        self.calls.append(("circle", center, radius, color))

    def request_redraw(self):
        self.calls.append(("redraw",))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def surface():
    return RecordingSurface()


def tri(*points, **kwargs):
    return Triangle(tuple(Vec3(*(float(c) for c in p)) for p in points), **kwargs)


@pytest.fixture
def make_tri():
    return tri


@pytest.fixture
def facing_tri():
    """Triangle in the z=0 plane whose normal is (0, 0, -1)."""
    return tri((0, 0, 0), (0, 1, 0), (1, 0, 0))
