"""
Visibility and flat lighting.

A triangle is visible when its normal points towards the camera, i.e.
dot(normal, p0 - camera) < 0. Zero counts as back-facing, which also culls
degenerate triangles (their normal normalizes to the zero vector).

Lighting is plain Lambert with a single directional light. The raw
intensity can be negative for faces that are visible but turned away from
the light; it is clamped into [0, 1] only when converted to a gray color.
"""
from softraster.math3d import Vec3
from softraster.mesh import Triangle

DEFAULT_LIGHT = Vec3(0.0, 0.0, -1.0)


def face_normal(tri: Triangle) -> Vec3:
    """Unit normal of (p1 - p0) x (p2 - p0)."""
    p0, p1, p2 = tri.p
    return (p1 - p0).cross(p2 - p0).normalize()


def facing(normal: Vec3, tri: Triangle, camera: Vec3) -> float:
    """Signed visibility term; negative means front-facing."""
    return normal.dot(tri.p[0] - camera)


def is_front_facing(normal: Vec3, tri: Triangle, camera: Vec3) -> bool:
    return facing(normal, tri, camera) < 0.0


def light_intensity(normal: Vec3, light: Vec3 = DEFAULT_LIGHT) -> float:
    """Lambert term dot(normal, light), unclamped."""
    return normal.dot(light.normalize())


def gray(intensity: float):
    """Clamp intensity into [0, 1] and return (level, RGB gray)."""
    level = max(0.0, min(1.0, intensity))
    g = int(round(255 * level))
    return level, (g, g, g)


def shade_triangle(tri: Triangle, intensity: float) -> Triangle:
    level, color = gray(intensity)
    return Triangle(tri.p, color, level)
