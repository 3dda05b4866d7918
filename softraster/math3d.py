import math
from dataclasses import dataclass
from typing import List, Optional


EPSILON = 1e-12


# ============================================================
#  Math primitives
# ============================================================

@dataclass(frozen=True)
class Vec3:
    """
    3D point or direction with a homogeneous w component.

    Used in:
      - mesh vertices (w = 1.0)
      - face normals, light direction, camera position
      - projected vertices before the homogeneous divide (w = view depth)

    Note:
      - Immutable (frozen); every operation returns a new object.
      - Arithmetic works on x, y, z only and resets w to 1.0.
    """
    x: float
    y: float
    z: float
    w: float = 1.0

    def __add__(self, o): return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)
    def __sub__(self, o): return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)
    def __mul__(self, k: float): return Vec3(self.x * k, self.y * k, self.z * k)
    def __truediv__(self, k: float): return Vec3(self.x / k, self.y / k, self.z / k)

    def dot(self, o) -> float:
        """Dot product (scalar product)."""
        return self.x * o.x + self.y * o.y + self.z * o.z

    def cross(self, o):
        """Cross product (vector product)."""
        return Vec3(
            self.y * o.z - self.z * o.y,
            self.z * o.x - self.x * o.z,
            self.x * o.y - self.y * o.x
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalize(self):
        """
        Return normalized vector (length=1).

        Degenerate vectors (length <= EPSILON) normalize to the zero vector,
        so a collapsed triangle ends up with a zero normal instead of NaN.
        """
        n = self.length()
        if n <= EPSILON:
            return Vec3(0.0, 0.0, 0.0)
        return self / n


class Mat4:
    """
    4x4 matrix (row-major, row-vector convention).

    A vertex is treated as a row vector multiplied from the left:

        out[c] = x*m[0][c] + y*m[1][c] + z*m[2][c] + w*m[3][c]

    so the fourth row holds the translation and the fourth column feeds w.

    Multiplication:
      - Matrix @ Matrix => Mat4 (a @ b applies a first, then b)
      - Matrix.apply(Vec3) => Vec3 with the computed w kept
    """
    def __init__(self, m: Optional[List[List[float]]] = None):
        self.m = m if m is not None else [[0.0]*4 for _ in range(4)]

    @staticmethod
    def identity():
        """Create identity matrix."""
        m = Mat4()
        for i in range(4):
            m.m[i][i] = 1.0
        return m

    def __matmul__(self, o: "Mat4") -> "Mat4":
        """Matrix multiplication (Mat4 @ Mat4)."""
        r = Mat4()
        for i in range(4):
            for j in range(4):
                s = 0.0
                for k in range(4):
                    s += self.m[i][k] * o.m[k][j]
                r.m[i][j] = s
        return r

    def __eq__(self, o) -> bool:
        return isinstance(o, Mat4) and self.m == o.m

    def __repr__(self) -> str:
        return f"Mat4({self.m!r})"

    def apply(self, v: Vec3) -> Vec3:
        """Multiply a row vector by the matrix (v * M)."""
        m = self.m
        return Vec3(
            v.x*m[0][0] + v.y*m[1][0] + v.z*m[2][0] + v.w*m[3][0],
            v.x*m[0][1] + v.y*m[1][1] + v.z*m[2][1] + v.w*m[3][1],
            v.x*m[0][2] + v.y*m[1][2] + v.z*m[2][2] + v.w*m[3][2],
            v.x*m[0][3] + v.y*m[1][3] + v.z*m[2][3] + v.w*m[3][3],
        )
