"""Top-level package interface for quadcube.

Expose the main API: quadrilateral extraction and cube inference.
"""
from .config import DetectorConfig, DEFAULT_CONFIG
from .types import Quadrilateral, CubeVerdict
from .detect import QuadrilateralExtractor, find_quadrilaterals
from .adjacency import AdjacencyGraph, shares_edge, shared_vertex_count
from .core import analyze_image, detect_cube, find_cube, find_cube_in_graph

__all__ = [
    "DetectorConfig",
    "DEFAULT_CONFIG",
    "Quadrilateral",
    "CubeVerdict",
    "QuadrilateralExtractor",
    "find_quadrilaterals",
    "AdjacencyGraph",
    "shares_edge",
    "shared_vertex_count",
    "analyze_image",
    "detect_cube",
    "find_cube",
    "find_cube_in_graph",
]
