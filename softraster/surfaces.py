"""
Drawing surfaces.

The renderer only needs a handful of primitives from whatever it draws on;
the two adapters here cover the interactive window (pygame) and headless
image output (Pillow).
"""
from typing import Protocol, Tuple

import pygame
from PIL import Image, ImageDraw

from softraster import raster
from softraster.mesh import Color

Point = Tuple[float, float]


def _near_surface(center: Point, radius: float, size: Tuple[int, int]) -> bool:
    x, y = center
    w, h = size
    return -radius <= x <= w + radius and -radius <= y <= h + radius


class DrawingSurface(Protocol):
    def size(self) -> Tuple[int, int]: ...
    def clear(self, color: Color) -> None: ...
    def fill_triangle(self, a: Point, b: Point, c: Point, color: Color) -> None: ...
    def draw_line(self, a: Point, b: Point, color: Color) -> None: ...
    def draw_circle(self, center: Point, radius: float, color: Color) -> None: ...
    def request_redraw(self) -> None: ...


# ============================================================
#  pygame
# ============================================================

class PygameSurface:
    """
    Adapter over a pygame.Surface.

    Filled triangles go through the numba rasterizer on a pixels3d view,
    edges through Bresenham, vertex markers through pygame.draw.circle.
    The pixels3d view is released after each triangle so the surface is
    never left locked for blitting.
    """
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.redraw_requested = False

    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def fill_triangle(self, a: Point, b: Point, c: Point, color: Color) -> None:
        img = pygame.surfarray.pixels3d(self.surface)
        raster.fill_triangle(img,
                             float(a[0]), float(a[1]),
                             float(b[0]), float(b[1]),
                             float(c[0]), float(c[1]),
                             color[0], color[1], color[2])
        del img

    def _set_pixel(self, x, y, color):
        w, h = self.surface.get_size()
        if 0 <= x < w and 0 <= y < h:
            self.surface.set_at((x, y), color)

    def draw_line(self, a: Point, b: Point, color: Color) -> None:
        w, h = self.surface.get_size()
        seg = raster.clip_segment(a[0], a[1], b[0], b[1], w, h)
        if seg is None:
            return
        x0, y0, x1, y1 = (int(round(c)) for c in seg)
        raster.draw_line(x0, y0, x1, y1, self._set_pixel, color)

    def draw_circle(self, center: Point, radius: float, color: Color) -> None:
        if not _near_surface(center, radius, self.surface.get_size()):
            return
        pygame.draw.circle(self.surface, color, (int(center[0]), int(center[1])), int(radius))

    def request_redraw(self) -> None:
        self.redraw_requested = True

    def take_redraw(self) -> bool:
        """Return and reset the redraw flag."""
        requested = self.redraw_requested
        self.redraw_requested = False
        return requested


# ============================================================
#  Pillow
# ============================================================

class ImageSurface:
    """RGB Pillow image used for headless snapshots."""

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0)):
        self.image = Image.new("RGB", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)
        self.frames = 0

    def size(self) -> Tuple[int, int]:
        return self.image.size

    def clear(self, color: Color) -> None:
        self._draw.rectangle([(0, 0), self.image.size], fill=color)

    def fill_triangle(self, a: Point, b: Point, c: Point, color: Color) -> None:
        self._draw.polygon([tuple(a), tuple(b), tuple(c)], fill=color)

    def draw_line(self, a: Point, b: Point, color: Color) -> None:
        seg = raster.clip_segment(a[0], a[1], b[0], b[1], *self.image.size)
        if seg is None:
            return
        x0, y0, x1, y1 = (int(round(c)) for c in seg)
        self._draw.line([(x0, y0), (x1, y1)], fill=color, width=1)

    def draw_circle(self, center: Point, radius: float, color: Color) -> None:
        if not _near_surface(center, radius, self.image.size):
            return
        x, y = center
        self._draw.ellipse([(x - radius, y - radius), (x + radius, y + radius)], outline=color)

    def request_redraw(self) -> None:
        self.frames += 1

    def save(self, path: str) -> None:
        self.image.save(path)
