import math
from typing import Optional

from softraster.math3d import Mat4, Vec3
from softraster.mesh import Triangle


# A vertex with |w| below this sits on the camera plane and cannot be divided.
W_EPSILON = 1e-9


# ============================================================
#  Projections
# ============================================================

def projection_matrix(near: float, far: float, fov: float, aspect: float) -> Mat4:
    """
    Perspective projection matrix (row-vector convention).

    Parameters:
      near   - near plane distance (positive)
      far    - far plane distance (positive, > near)
      fov    - field of view in degrees
      aspect - surface width / height

    Notes:
      - The camera looks towards +Z; after projection w = z_view.
      - Built once at startup and never updated on resize.
    """
    f = 1.0 / math.tan(math.radians(fov) / 2.0)
    m = Mat4()
    m.m[0][0] = aspect * f
    m.m[1][1] = f
    m.m[2][2] = far / (far - near)
    m.m[3][2] = (-far * near) / (far - near)
    m.m[2][3] = 1.0
    m.m[3][3] = 0.0
    return m


def perspective_divide(v: Vec3) -> Optional[Vec3]:
    """Divide x, y, z by w; None if w is (numerically) zero."""
    if abs(v.w) < W_EPSILON:
        return None
    return Vec3(v.x / v.w, v.y / v.w, v.z / v.w)


def project_triangle(tri: Triangle, proj: Mat4) -> Optional[Triangle]:
    """
    Project a view-space triangle to normalized device coordinates.

    Returns None when a vertex lies on the camera plane. Vertices behind the
    camera (w < 0) are divided anyway; there is no near-plane clipping.
    """
    out = []
    for v in tri.p:
        ndc = perspective_divide(proj.apply(v))
        if ndc is None:
            return None
        out.append(ndc)
    return Triangle(tuple(out), tri.color, tri.shade)


def to_viewport(tri: Triangle, width: float, height: float) -> Triangle:
    """
    Convert NDC [-1..1] to pixel coordinates [0..W], [0..H].

    Screen origin is the top-left corner; y is not flipped. z is passed
    through for depth sorting.
    """
    hw, hh = 0.5 * width, 0.5 * height
    out = tuple(Vec3((v.x + 1.0) * hw, (v.y + 1.0) * hh, v.z) for v in tri.p)
    return Triangle(out, tri.color, tri.shade)
