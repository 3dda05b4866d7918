"""
Run configuration.

All options are fixed for the lifetime of a run; there is no live
reconfiguration. The projection parameters and the aspect ratio are read
once when the Renderer is built.
"""
import argparse
import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from softraster.math3d import Vec3
from softraster.mesh import Color


class DrawMode(enum.Enum):
    FILLED = "filled"
    WIREFRAME = "wireframe"
    BOTH = "both"


@dataclass(frozen=True)
class RenderConfig:
    width: int = 512
    height: int = 480
    draw_mode: DrawMode = DrawMode.BOTH
    depth_sort: bool = True
    near: float = 0.1
    far: float = 1000.0
    fov: float = 90.0           # degrees
    mesh_path: Optional[str] = None   # None => built-in cube
    z_offset: float = 3.0
    camera: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    light: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    background: Color = (0, 0, 0)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"surface size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.near < self.far:
            raise ValueError(f"need 0 < near < far, got near={self.near} far={self.far}")
        if not 0.0 < self.fov < 180.0:
            raise ValueError(f"fov must be in (0, 180) degrees, got {self.fov}")
        if self.light.length() == 0.0:
            raise ValueError("light direction must not be zero")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True)
class RunOptions:
    """Host-side options that do not affect the pipeline itself."""
    snapshot: Optional[str] = None
    time: float = 0.0
    verbose: bool = False
    log_file: Optional[str] = None


def build_parser() -> argparse.ArgumentParser:
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(
        prog="softraster",
        description="Spin a triangle mesh through a flat-shaded software pipeline.")
    parser.add_argument("-m", "--mesh", dest="mesh_path", default=None,
                        help="OBJ file to render (default: built-in cube)")
    parser.add_argument("--size", nargs=2, type=int, metavar=("W", "H"),
                        default=[defaults.width, defaults.height], help="surface size in pixels")
    parser.add_argument("--mode", choices=[m.value for m in DrawMode],
                        default=defaults.draw_mode.value, help="draw mode")
    parser.add_argument("--no-depth-sort", dest="depth_sort", action="store_false",
                        help="dispatch triangles in mesh order")
    parser.add_argument("--near", type=float, default=defaults.near)
    parser.add_argument("--far", type=float, default=defaults.far)
    parser.add_argument("--fov", type=float, default=defaults.fov, help="field of view in degrees")
    parser.add_argument("--z-offset", type=float, default=defaults.z_offset,
                        help="distance the mesh is pushed along +Z")
    parser.add_argument("--snapshot", default=None, metavar="PATH",
                        help="render one frame to an image file instead of opening a window")
    parser.add_argument("--time", type=float, default=0.0,
                        help="elapsed time (s) used for --snapshot")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> Tuple[RenderConfig, RunOptions]:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = RenderConfig(
            width=args.size[0],
            height=args.size[1],
            draw_mode=DrawMode(args.mode),
            depth_sort=args.depth_sort,
            near=args.near,
            far=args.far,
            fov=args.fov,
            mesh_path=args.mesh_path,
            z_offset=args.z_offset,
        )
    except ValueError as e:
        parser.error(str(e))
    options = RunOptions(
        snapshot=args.snapshot,
        time=args.time,
        verbose=args.verbose,
        log_file=args.log_file,
    )
    return config, options
