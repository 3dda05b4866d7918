import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from softraster.math3d import Vec3

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)


class MeshLoadError(Exception):
    """Raised when a mesh file cannot be turned into a Mesh."""


# ============================================================
#  Mesh store
# ============================================================

@dataclass(frozen=True)
class Triangle:
    """
    Three vertices plus a flat color.

    Vertex order defines the winding: the face normal is
    (p1 - p0) x (p2 - p0), so culling only works if the whole mesh
    uses the same winding.

    shade is the clamped light intensity the color was built from
    (1.0 until lighting assigns it).
    """
    p: Tuple[Vec3, Vec3, Vec3]
    color: Color = WHITE
    shade: float = 1.0


@dataclass(frozen=True)
class Mesh:
    """Ordered, immutable collection of triangles."""
    tris: Tuple[Triangle, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.tris)

    def __iter__(self):
        return iter(self.tris)

    @classmethod
    def load(cls, path: str) -> "Mesh":
        return load_obj(path)

    @classmethod
    def cube(cls) -> "Mesh":
        """Unit cube spanning (0,0,0)-(1,1,1), 12 triangles."""
        faces = [
            # SOUTH
            ((0, 0, 0), (0, 1, 0), (1, 1, 0)),
            ((0, 0, 0), (1, 1, 0), (1, 0, 0)),
            # EAST
            ((1, 0, 0), (1, 1, 0), (1, 1, 1)),
            ((1, 0, 0), (1, 1, 1), (1, 0, 1)),
            # NORTH
            ((1, 0, 1), (1, 1, 1), (0, 1, 1)),
            ((1, 0, 1), (0, 1, 1), (0, 0, 1)),
            # WEST
            ((0, 0, 1), (0, 1, 1), (0, 1, 0)),
            ((0, 0, 1), (0, 1, 0), (0, 0, 0)),
            # TOP
            ((0, 1, 0), (0, 1, 1), (1, 1, 1)),
            ((0, 1, 0), (1, 1, 1), (1, 1, 0)),
            # BOTTOM
            ((1, 0, 1), (0, 0, 1), (0, 0, 0)),
            ((1, 0, 1), (0, 0, 0), (1, 0, 0)),
        ]
        tris = tuple(
            Triangle(tuple(Vec3(float(x), float(y), float(z)) for x, y, z in face))
            for face in faces
        )
        return cls(tris)


# ============================================================
#  OBJ loader
# ============================================================

def _parse_index(token: str) -> int:
    # "7", "7/1" and "7/1/3" all reference vertex 7
    return int(token.split("/")[0])


def load_obj(path: str) -> Mesh:
    """
    Minimal OBJ parser for triangular meshes.

    Supported:
      v x y z      (extra tokens ignored)
      f i1 i2 i3   (1-based vertex indices, triangles only)

    Only lines whose first character is the directive letter and whose
    second character is a space are considered; everything else (comments,
    vn, vt, blank lines) is skipped.

    Raises MeshLoadError if the file cannot be read, a numeric token is
    missing or malformed, or a face references a vertex that does not exist.
    """
    verts: List[Vec3] = []
    tris: List[Triangle] = []

    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise MeshLoadError(f"cannot read mesh file {path}: {e}") from e

    for lineno, line in enumerate(lines, start=1):
        if line[1:2] != " ":
            continue
        directive = line[0]
        parts = line.split()

        if directive == "v":
            try:
                x, y, z = (float(t) for t in parts[1:4])
            except ValueError as e:
                raise MeshLoadError(f"{path}:{lineno}: bad vertex {line.strip()!r}") from e
            verts.append(Vec3(x, y, z))

        elif directive == "f":
            try:
                idx = [_parse_index(t) for t in parts[1:4]]
            except ValueError as e:
                raise MeshLoadError(f"{path}:{lineno}: bad face {line.strip()!r}") from e
            if len(idx) != 3:
                raise MeshLoadError(f"{path}:{lineno}: face needs 3 indices, got {len(idx)}")
            for i in idx:
                if i < 1 or i > len(verts):
                    raise MeshLoadError(
                        f"{path}:{lineno}: face index {i} out of range (1..{len(verts)})")
            tris.append(Triangle((verts[idx[0] - 1], verts[idx[1] - 1], verts[idx[2] - 1])))

    logger.info("Loaded %s: %d vertices, %d triangles", path, len(verts), len(tris))
    return Mesh(tuple(tris))
