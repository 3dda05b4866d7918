import math

import pytest

from softraster.math3d import Mat4, Vec3
from softraster.transform import frame_rotations, rotation_x, rotation_z, transform_triangle


def xyz(v):
    return v.x, v.y, v.z


def test_zero_angle_is_identity():
    assert rotation_z(0.0) == Mat4.identity()
    assert rotation_x(0.0) == Mat4.identity()


def test_rotation_z_quarter_turn():
    v = rotation_z(math.pi / 2).apply(Vec3(1.0, 0.0, 0.0))
    assert xyz(v) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_rotation_x_quarter_turn():
    v = rotation_x(math.pi / 2).apply(Vec3(0.0, 1.0, 0.0))
    assert xyz(v) == pytest.approx((0.0, 0.0, 1.0), abs=1e-12)


def test_rotation_x_leaves_x_axis_alone():
    v = rotation_x(1.234).apply(Vec3(2.0, 0.0, 0.0))
    assert xyz(v) == pytest.approx((2.0, 0.0, 0.0))


def test_secondary_axis_runs_at_half_speed():
    rot_z, rot_x = frame_rotations(2.0)
    assert rot_z == rotation_z(2.0)
    assert rot_x == rotation_x(1.0)


def test_transform_applies_z_then_x(make_tri):
    t = make_tri((1, 1, 1), (1, -2, 0.5), (0, 3, -1))
    rot_z, rot_x = frame_rotations(1.0)
    out = transform_triangle(t, rot_z, rot_x, 0.0)
    for src, got in zip(t.p, out.p):
        expected = rot_x.apply(rot_z.apply(src))
        assert xyz(got) == pytest.approx(xyz(expected))


def test_rotation_order_matters():
    rot_z, rot_x = frame_rotations(1.0)
    p = Vec3(1.0, 1.0, 1.0)
    zx = rot_x.apply(rot_z.apply(p))
    xz = rot_z.apply(rot_x.apply(p))
    assert xyz(zx) != pytest.approx(xyz(xz))


def test_translation_happens_after_rotation(make_tri):
    t = make_tri((0, 0, 1), (0, 0, 1), (0, 0, 1))
    # rot_z(pi) keeps the point, rot_x(pi/2) swings +z onto -y
    rot_z, rot_x = frame_rotations(math.pi)
    out = transform_triangle(t, rot_z, rot_x, 3.0)
    assert xyz(out.p[0]) == pytest.approx((0.0, -1.0, 3.0), abs=1e-12)


def test_transform_keeps_color(make_tri):
    t = make_tri((0, 0, 0), (0, 1, 0), (1, 0, 0), color=(1, 2, 3), shade=0.5)
    out = transform_triangle(t, *frame_rotations(0.3), 2.0)
    assert out.color == (1, 2, 3)
    assert out.shade == 0.5
    # the source triangle is left untouched
    assert t.p[0] == Vec3(0.0, 0.0, 0.0)
