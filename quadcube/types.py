from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple
import numpy as np

Point = Tuple[float, float]


@dataclass(frozen=True)
class Quadrilateral:
    points: Tuple[Point, Point, Point, Point]   # in approximation order

    # pass that produced it (not part of equality)
    channel: Optional[int] = field(default=None, compare=False)
    level: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        pts = tuple(tuple(p) for p in self.points)
        if len(pts) != 4:
            raise ValueError(f"a quadrilateral needs exactly 4 vertices, got {len(pts)}")
        if any(len(p) != 2 for p in pts):
            raise ValueError("vertices must be 2D points")
        object.__setattr__(self, "points", pts)

    @classmethod
    def from_contour(cls, poly: np.ndarray, channel: Optional[int] = None,
                     level: Optional[int] = None) -> "Quadrilateral":
        # poly shape: (4,1,2) as returned by approxPolyDP
        pts = poly.reshape(-1, 2)
        return cls(tuple((int(x), int(y)) for x, y in pts), channel=channel, level=level)

    def as_contour(self) -> np.ndarray:
        return np.array(self.points, dtype=np.float64).round().astype(np.int32).reshape(-1, 1, 2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "points": [list(p) for p in self.points],
            "channel": self.channel,
            "level": self.level,
        }


CandidateSet = List[Quadrilateral]


@dataclass(frozen=True)
class CubeVerdict:
    detected: bool
    faces: Optional[Tuple[Quadrilateral, Quadrilateral, Quadrilateral]] = None
    indices: Optional[Tuple[int, int, int]] = None

    def __bool__(self) -> bool:
        return self.detected

    def to_dict(self) -> Dict[str, Any]:
        return {
            "detected": self.detected,
            "indices": list(self.indices) if self.indices is not None else None,
            "faces": [q.to_dict() for q in self.faces] if self.faces is not None else None,
        }


def candidates_to_json(candidates: Sequence[Quadrilateral]) -> List[Dict[str, Any]]:
    return [q.to_dict() for q in candidates]
