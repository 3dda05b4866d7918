import math

import numpy as np

from numba import njit


# ============================================================
#  Bresenham line
# ============================================================

def draw_line(x0, y0, x1, y1, set_pixel, color):
    """
    Bresenham integer line drawing.

    Parameters:
      x0, y0, x1, y1  - endpoints
      set_pixel(x,y,color) - callback for plotting
      color - RGB tuple

    Used in wireframe mode to draw triangle edges.
    """
    steep = abs(x0 - x1) < abs(y0 - y1)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = abs(y1 - y0)
    error2 = 0
    y = y0
    ystep = 1 if y1 > y0 else -1

    for x in range(x0, x1 + 1):
        if steep:
            set_pixel(y, x, color)
        else:
            set_pixel(x, y, color)
        error2 += 2 * dy
        if error2 > dx:
            y += ystep
            error2 -= 2 * dx


def clip_segment(x0, y0, x1, y1, width, height):
    """
    Liang-Barsky clip of a segment against [0..width-1] x [0..height-1].

    Returns the clipped endpoints, or None if nothing is left or an
    endpoint is not finite.
    """
    if not all(math.isfinite(c) for c in (x0, y0, x1, y1)):
        return None
    xmax, ymax = width - 1, height - 1
    dx, dy = x1 - x0, y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0), (dx, xmax - x0), (-dy, y0), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy


# ============================================================
#  Numba rasterizer
# ============================================================

@njit(cache=True)
def _barycentric(ax, ay, bx, by, cx, cy, px, py):
    """
    Barycentric coordinates of (px,py) in triangle (A,B,C).

    Returns (alpha, beta, gamma). If triangle is degenerate => (-1,-1,-1).
    """
    v0x, v0y = bx - ax, by - ay
    v1x, v1y = cx - ax, cy - ay
    v2x, v2y = px - ax, py - ay
    den = v0x * v1y - v1x * v0y
    if abs(den) < 1e-12:
        return -1.0, -1.0, -1.0
    inv = 1.0 / den
    beta = (v2x * v1y - v1x * v2y) * inv
    gamma = (v0x * v2y - v2x * v0y) * inv
    alpha = 1.0 - beta - gamma
    return alpha, beta, gamma


@njit(cache=True)
def fill_triangle(img, x0, y0, x1, y1, x2, y2, r, g, b):
    """
    Rasterize a filled triangle with a constant color.

    No depth test: the last triangle drawn wins, so callers dispatch
    back-to-front.

    img:
      - pygame.surfarray.pixels3d -> shape (W,H,3), dtype=uint8
      - index order is [x,y,color]
      - a pixel is covered when its center (x+0.5, y+0.5) lies inside
        the triangle; either winding works
    """
    W, H, _ = img.shape

    minx = max(0, int(math.floor(min(x0, x1, x2))))
    maxx = min(W - 1, int(math.ceil(max(x0, x1, x2))))
    miny = max(0, int(math.floor(min(y0, y1, y2))))
    maxy = min(H - 1, int(math.ceil(max(y0, y1, y2))))

    for y in range(miny, maxy + 1):
        py = y + 0.5
        for x in range(minx, maxx + 1):
            px = x + 0.5
            a, b0, c = _barycentric(x0, y0, x1, y1, x2, y2, px, py)
            if a < 0.0 or b0 < 0.0 or c < 0.0:
                continue
            img[x, y, 0] = r
            img[x, y, 1] = g
            img[x, y, 2] = b


def warm_up():
    """Trigger numba compilation before the first frame."""
    dummy = np.zeros((4, 4, 3), dtype=np.uint8)
    fill_triangle(dummy, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 255, 255, 255)
