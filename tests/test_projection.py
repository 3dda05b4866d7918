import pytest

from softraster.math3d import Vec3
from softraster.projection import (
    perspective_divide, project_triangle, projection_matrix, to_viewport,
)


def test_projection_matrix_entries():
    near, far = 0.1, 1000.0
    m = projection_matrix(near, far, 90.0, 2.0).m
    assert m[0][0] == pytest.approx(2.0)
    assert m[1][1] == pytest.approx(1.0)
    assert m[2][2] == pytest.approx(far / (far - near))
    assert m[3][2] == pytest.approx(-far * near / (far - near))
    assert m[2][3] == 1.0
    assert m[3][3] == 0.0
    nonzero = {(0, 0), (1, 1), (2, 2), (3, 2), (2, 3)}
    for i in range(4):
        for j in range(4):
            if (i, j) not in nonzero:
                assert m[i][j] == 0.0


def test_narrower_fov_zooms_in():
    wide = projection_matrix(0.1, 100.0, 90.0, 1.0).m
    narrow = projection_matrix(0.1, 100.0, 60.0, 1.0).m
    assert narrow[1][1] > wide[1][1]


def test_projected_w_is_view_depth():
    m = projection_matrix(0.1, 1000.0, 90.0, 1.0)
    assert m.apply(Vec3(0.3, 0.2, 7.0)).w == pytest.approx(7.0)


def test_perspective_divide():
    v = perspective_divide(Vec3(2.0, 4.0, 6.0, 2.0))
    assert v == Vec3(1.0, 2.0, 3.0)


@pytest.mark.parametrize("w", [0.0, -0.0, 1e-12])
def test_perspective_divide_on_camera_plane(w):
    assert perspective_divide(Vec3(1.0, 1.0, 1.0, w)) is None


def test_project_triangle_skips_vertex_on_camera_plane(make_tri):
    proj = projection_matrix(0.1, 1000.0, 90.0, 1.0)
    t = make_tri((0, 0, 3), (0, 1, 0), (1, 0, 3))
    assert project_triangle(t, proj) is None


def test_behind_camera_is_not_clipped(make_tri):
    proj = projection_matrix(0.1, 1000.0, 90.0, 1.0)
    t = make_tri((1, 1, -2), (0, 1, -2), (1, 0, -2))
    out = project_triangle(t, proj)
    assert out is not None
    # dividing by a negative w mirrors the point
    assert out.p[0].x == pytest.approx(-0.5)
    assert out.p[0].y == pytest.approx(-0.5)


def test_project_triangle_keeps_color(make_tri):
    proj = projection_matrix(0.1, 1000.0, 90.0, 1.0)
    t = make_tri((0, 0, 3), (0, 1, 3), (1, 0, 3), color=(9, 9, 9), shade=0.1)
    out = project_triangle(t, proj)
    assert out.color == (9, 9, 9)
    assert out.shade == 0.1


def test_viewport_corners_and_center(make_tri):
    t = make_tri((-1, -1, 0.5), (1, 1, 0.5), (0, 0, 0.5))
    out = to_viewport(t, 200, 100)
    assert out.p[0] == Vec3(0.0, 0.0, 0.5)
    assert out.p[1] == Vec3(200.0, 100.0, 0.5)
    assert out.p[2] == Vec3(100.0, 50.0, 0.5)


def test_projection_and_viewport_are_pure(make_tri):
    proj = projection_matrix(0.1, 1000.0, 75.0, 4 / 3)
    t = make_tri((0.2, -0.4, 3.1), (0.7, 0.1, 2.9), (-0.3, 0.5, 3.7))
    first = to_viewport(project_triangle(t, proj), 640, 480)
    second = to_viewport(project_triangle(t, proj), 640, 480)
    assert first == second
