"""
Vision primitives used by the quadrilateral sweep.

The extractor only talks to a `GeometryPrimitives` object; `OpenCVPrimitives`
is the default implementation backed by cv2.
"""

from typing import List, Protocol, runtime_checkable
import numpy as np
import cv2


@runtime_checkable
class GeometryPrimitives(Protocol):
    """Capabilities the extractor needs from a vision library."""

    def smooth(self, image: np.ndarray) -> np.ndarray:
        ...

    def extract_channel(self, image: np.ndarray, channel: int) -> np.ndarray:
        ...

    def edge_map(self, plane: np.ndarray, low: float, high: float, aperture: int) -> np.ndarray:
        ...

    def dilate(self, binary: np.ndarray) -> np.ndarray:
        ...

    def threshold_at(self, plane: np.ndarray, level: int) -> np.ndarray:
        """Binary image, 255 where plane >= level."""
        ...

    def trace_contours(self, binary: np.ndarray) -> List[np.ndarray]:
        ...

    def simplify(self, contour: np.ndarray, tolerance: float) -> np.ndarray:
        ...

    def area(self, contour: np.ndarray) -> float:
        ...

    def is_convex(self, contour: np.ndarray) -> bool:
        ...

    def perimeter(self, contour: np.ndarray) -> float:
        ...


class OpenCVPrimitives:
    def __init__(self, blur_ksize: int = 9):
        self.blur_ksize = blur_ksize

    def smooth(self, image: np.ndarray) -> np.ndarray:
        return cv2.medianBlur(image, self.blur_ksize)

    def extract_channel(self, image: np.ndarray, channel: int) -> np.ndarray:
        return np.ascontiguousarray(image[:, :, channel])

    def edge_map(self, plane: np.ndarray, low: float, high: float, aperture: int) -> np.ndarray:
        return cv2.Canny(plane, low, high, apertureSize=aperture)

    def dilate(self, binary: np.ndarray) -> np.ndarray:
        # default 3x3 rectangle, anchor at center, one pass
        return cv2.dilate(binary, None)

    def threshold_at(self, plane: np.ndarray, level: int) -> np.ndarray:
        return np.where(plane >= level, 255, 0).astype(np.uint8)

    def trace_contours(self, binary: np.ndarray) -> List[np.ndarray]:
        contours, _ = cv2.findContours(binary, cv2.RETR_LIST, cv2.CHAIN_APPROX_SIMPLE)
        return list(contours)

    def simplify(self, contour: np.ndarray, tolerance: float) -> np.ndarray:
        return cv2.approxPolyDP(contour, tolerance, True)

    def area(self, contour: np.ndarray) -> float:
        return float(cv2.contourArea(contour))

    def is_convex(self, contour: np.ndarray) -> bool:
        return bool(cv2.isContourConvex(contour))

    def perimeter(self, contour: np.ndarray) -> float:
        return float(cv2.arcLength(contour, True))
