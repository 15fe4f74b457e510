"""Vectors, matrices, meshes, a camera and per-vertex lighting for simple 3D rendering."""

__version__ = "1.0.0"
__all__ = ["vector3", "matrix4", "mesh", "camera", "lighting"]