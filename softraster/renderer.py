import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from softraster.config import DrawMode, RenderConfig
from softraster.math3d import Vec3
from softraster.mesh import Color, Mesh, Triangle
from softraster.projection import project_triangle, projection_matrix, to_viewport
from softraster.shading import face_normal, is_front_facing, light_intensity, shade_triangle
from softraster.surfaces import DrawingSurface
from softraster.transform import frame_rotations, transform_triangle

logger = logging.getLogger(__name__)

EDGE_COLORS = ((255, 0, 0), (0, 255, 0), (0, 0, 255))
MARKER_RADIUS = 3.0


@dataclass
class Frame:
    """Screen-space triangles for one frame plus what was dropped on the way."""
    triangles: List[Triangle] = field(default_factory=list)
    culled: int = 0
    skipped: int = 0   # a vertex landed on the camera plane (w == 0)


# ============================================================
#  Depth sort / dispatch
# ============================================================

def depth_key(tri: Triangle) -> float:
    """Mean projected z of the three vertices."""
    return (tri.p[0].z + tri.p[1].z + tri.p[2].z) / 3.0


def sort_back_to_front(batch: Iterable[Triangle]) -> List[Triangle]:
    """
    Painter's order: farthest first.

    sorted() is stable, so triangles with equal depth keep mesh order.
    """
    return sorted(batch, key=depth_key, reverse=True)


def _xy(v: Vec3):
    return v.x, v.y


def draw_wireframe(surface: DrawingSurface, tri: Triangle, color: Color) -> None:
    a, b, c = (_xy(v) for v in tri.p)
    surface.draw_line(a, b, EDGE_COLORS[0])
    surface.draw_line(b, c, EDGE_COLORS[1])
    surface.draw_line(c, a, EDGE_COLORS[2])
    for p in (a, b, c):
        surface.draw_circle(p, MARKER_RADIUS, color)


def dispatch(batch: Iterable[Triangle], surface: DrawingSurface, mode: DrawMode) -> None:
    """Send triangles to the surface in the given order."""
    for tri in batch:
        if mode in (DrawMode.FILLED, DrawMode.BOTH):
            a, b, c = (_xy(v) for v in tri.p)
            surface.fill_triangle(a, b, c, tri.color)
        if mode in (DrawMode.WIREFRAME, DrawMode.BOTH):
            draw_wireframe(surface, tri, tri.color)


# ============================================================
#  Frame pipeline
# ============================================================

class Renderer:
    """
    Owns the mesh and the projection matrix; everything else is per frame.

    Per triangle:
      rotate (Z, then X at half speed) -> translate along +Z
      -> normal -> cull -> light -> project -> viewport
    then the whole batch is depth sorted and dispatched.
    """
    def __init__(self, mesh: Mesh, config: Optional[RenderConfig] = None):
        self.mesh = mesh
        self.config = config or RenderConfig()
        self.camera = self.config.camera
        self.light = self.config.light.normalize()
        self.proj = projection_matrix(self.config.near, self.config.far,
                                      self.config.fov, self.config.aspect_ratio)
        logger.debug("Renderer ready: %d triangles, aspect %.4f",
                     len(mesh), self.config.aspect_ratio)

    def build_frame(self, t: float, width: int, height: int) -> Frame:
        """Run the pipeline for elapsed time t without drawing anything."""
        rot_z, rot_x = frame_rotations(t)
        frame = Frame()

        for tri in self.mesh:
            moved = transform_triangle(tri, rot_z, rot_x, self.config.z_offset)

            normal = face_normal(moved)
            if not is_front_facing(normal, moved, self.camera):
                frame.culled += 1
                continue

            lit = shade_triangle(moved, light_intensity(normal, self.light))

            projected = project_triangle(lit, self.proj)
            if projected is None:
                frame.skipped += 1
                continue

            frame.triangles.append(to_viewport(projected, width, height))

        if self.config.depth_sort:
            frame.triangles = sort_back_to_front(frame.triangles)
        return frame

    def render(self, surface: DrawingSurface, t: float) -> Frame:
        width, height = surface.size()
        frame = self.build_frame(t, width, height)
        dispatch(frame.triangles, surface, self.config.draw_mode)
        surface.request_redraw()
        logger.debug("t=%.3f drawn=%d culled=%d skipped=%d",
                     t, len(frame.triangles), frame.culled, frame.skipped)
        return frame
