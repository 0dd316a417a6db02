from typing import Dict, Iterator, List, Sequence, Set, Tuple
import numpy as np

from .config import DEFAULT_CONFIG
from .types import Quadrilateral

SHARED_EDGE_VERTICES = 2


def shared_vertex_count(q1: Quadrilateral, q2: Quadrilateral, tol: float = DEFAULT_CONFIG.vertex_tol) -> int:
    a = np.asarray(q1.points, dtype=np.float64)
    b = np.asarray(q2.points, dtype=np.float64)
    d = np.linalg.norm(a[:, None, :] - b[None, :, :], axis=2)   # 4x4 distances
    return int(np.count_nonzero(d < tol))


def shares_edge(q1: Quadrilateral, q2: Quadrilateral, tol: float = DEFAULT_CONFIG.vertex_tol) -> bool:
    """
    True iff exactly two vertices coincide.

    One shared vertex is only a touching corner, three or four mean the two
    quads are (near) duplicates from different passes.
    """
    return shared_vertex_count(q1, q2, tol) == SHARED_EDGE_VERTICES


class AdjacencyGraph:
    """Shared-edge relation over a candidate set, computed once."""

    def __init__(self, size: int, neighbours: Dict[int, Set[int]]):
        self.size = size
        self._neighbours = neighbours

    @classmethod
    def from_candidates(cls, candidates: Sequence[Quadrilateral],
                        tol: float = DEFAULT_CONFIG.vertex_tol) -> "AdjacencyGraph":
        n = len(candidates)
        nbrs: Dict[int, Set[int]] = {i: set() for i in range(n)}
        for i in range(n):
            for j in range(i + 1, n):
                if shares_edge(candidates[i], candidates[j], tol):
                    nbrs[i].add(j)
                    nbrs[j].add(i)
        return cls(n, nbrs)

    def neighbours(self, i: int) -> Set[int]:
        return set(self._neighbours.get(i, ()))

    def adjacent(self, i: int, j: int) -> bool:
        return j in self._neighbours.get(i, ())

    def edges(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.size):
            for j in sorted(self._neighbours[i]):
                if j > i:
                    yield i, j

    def degree(self) -> List[int]:
        return [len(self._neighbours[i]) for i in range(self.size)]
