"""Wavefront OBJ parsing, mesh validation and triangulation, and an orbit camera."""

__version__ = "0.1.0"
__all__ = ["camera", "cli", "errors", "mesh", "parser", "scanner", "vector"]