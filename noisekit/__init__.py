"""Coherent noise functions, domain warp offsets and a small wall-clock timer."""

__version__ = "0.1.0"
__all__ = [
    "clock",
    "tables_2d",
    "tables_3d",
    "primitives",
    "opensimplex2s",
    "lattice",
    "warp",
]