"""Flat-shaded software rendering pipeline for a single spinning mesh."""
from softraster.config import DrawMode, RenderConfig
from softraster.math3d import Mat4, Vec3
from softraster.mesh import Mesh, MeshLoadError, Triangle, load_obj
from softraster.renderer import Frame, Renderer

__version__ = "0.1.0"
