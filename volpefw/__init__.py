"""Cameras, frustum planes, grids, sphere meshes, a sample runner and a tiny JSON helper for 3D rendering samples."""

__version__ = "0.1.0"