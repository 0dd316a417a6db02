import logging
from typing import Optional, Sequence, Tuple
import numpy as np

from .adjacency import AdjacencyGraph, shares_edge
from .config import DEFAULT_CONFIG, DetectorConfig
from .detect import QuadrilateralExtractor
from .types import CandidateSet, CubeVerdict, Quadrilateral

logger = logging.getLogger(__name__)

NO_CUBE = CubeVerdict(detected=False)


def _verdict(candidates: Sequence[Quadrilateral], i: int, j: int, k: int) -> CubeVerdict:
    return CubeVerdict(
        detected=True,
        faces=(candidates[i], candidates[j], candidates[k]),
        indices=(i, j, k),
    )


def find_cube(candidates: Sequence[Quadrilateral], tol: float = DEFAULT_CONFIG.vertex_tol) -> CubeVerdict:
    """
    Look for three candidates that could be the visible faces of a cube.

    A triple i < j < k qualifies when i and j share an edge and k shares an
    edge with either of them. The first qualifying triple wins. Cubic in the
    number of candidates, which stays in the tens for one image.
    """
    n = len(candidates)
    for i in range(n):
        for j in range(i + 1, n):
            if not shares_edge(candidates[i], candidates[j], tol):
                continue
            for k in range(j + 1, n):
                if shares_edge(candidates[i], candidates[k], tol) or shares_edge(candidates[j], candidates[k], tol):
                    return _verdict(candidates, i, j, k)
    return NO_CUBE


def find_cube_in_graph(graph: AdjacencyGraph, candidates: Sequence[Quadrilateral]) -> CubeVerdict:
    """Same search as `find_cube`, over a prebuilt adjacency graph."""
    if graph.size != len(candidates):
        raise ValueError(f"graph has {graph.size} nodes but {len(candidates)} candidates were given")
    for i, j in graph.edges():
        later = [k for k in graph.neighbours(i) | graph.neighbours(j) if k > j]
        if later:
            return _verdict(candidates, i, j, min(later))
    return NO_CUBE


def detect_cube(candidates: Sequence[Quadrilateral], tol: float = DEFAULT_CONFIG.vertex_tol) -> bool:
    return find_cube(candidates, tol).detected


def analyze_image(
        image: Optional[np.ndarray],
        config: Optional[DetectorConfig] = None,
    ) -> Tuple[CandidateSet, CubeVerdict]:
    config = config or DEFAULT_CONFIG
    candidates = QuadrilateralExtractor(config).extract(image)
    verdict = find_cube(candidates, config.vertex_tol)
    if verdict:
        logger.info(f"Cube found: candidates {verdict.indices} of {len(candidates)}")
    else:
        logger.info(f"No cube among {len(candidates)} candidates")
    return candidates, verdict
