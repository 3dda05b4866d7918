import math
from typing import Tuple

from softraster.math3d import Mat4, Vec3
from softraster.mesh import Triangle


# Secondary axis spins at half the rate of the Z axis.
X_RATE = 0.5


# ============================================================
#  3D transforms
# ============================================================

def rotation_z(a: float) -> Mat4:
    """Rotation in the XY plane (about Z) by angle a (radians)."""
    c, s = math.cos(a), math.sin(a)
    m = Mat4()
    m.m[0][0] = c
    m.m[0][1] = s
    m.m[1][0] = -s
    m.m[1][1] = c
    m.m[2][2] = 1.0
    m.m[3][3] = 1.0
    return m


def rotation_x(a: float) -> Mat4:
    """Rotation in the YZ plane (about X) by angle a (radians)."""
    c, s = math.cos(a), math.sin(a)
    m = Mat4()
    m.m[0][0] = 1.0
    m.m[1][1] = c
    m.m[1][2] = s
    m.m[2][1] = -s
    m.m[2][2] = c
    m.m[3][3] = 1.0
    return m


def frame_rotations(t: float) -> Tuple[Mat4, Mat4]:
    """Both rotation matrices for elapsed time t (seconds)."""
    return rotation_z(t), rotation_x(t * X_RATE)


def transform_triangle(tri: Triangle, rot_z: Mat4, rot_x: Mat4, z_offset: float) -> Triangle:
    """
    Rotate about Z, then about X, then push forward along Z.

    The order matters: rotations do not commute and the offset has to be
    added after rotating, otherwise the mesh orbits the camera instead of
    spinning in place.
    """
    out = []
    for v in tri.p:
        r = rot_x.apply(rot_z.apply(v))
        out.append(Vec3(r.x, r.y, r.z + z_offset))
    return Triangle(tuple(out), tri.color, tri.shade)
