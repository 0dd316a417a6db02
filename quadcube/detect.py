import logging
from typing import Iterator, List, Optional, Tuple
import numpy as np

from .config import DEFAULT_CONFIG, DetectorConfig
from .geometry import GeometryPrimitives, OpenCVPrimitives
from .types import CandidateSet, Quadrilateral

logger = logging.getLogger(__name__)

N_CHANNELS = 3


class QuadrilateralExtractor:
    """
    Sweep every colour plane of an image over several binarisations and keep
    the contours that simplify to large convex quadrilaterals.

    Pass 0 of each plane is a dilated Canny edge map; passes 1..N-1 threshold
    the plane at (l+1)*255/N. Results are appended in pass order and never
    deduplicated: the same face usually shows up in several passes.
    """

    def __init__(self, config: Optional[DetectorConfig] = None,
                 primitives: Optional[GeometryPrimitives] = None):
        self.config = config or DEFAULT_CONFIG
        self.primitives = primitives or OpenCVPrimitives(blur_ksize=self.config.blur_ksize)

    def extract(self, image: Optional[np.ndarray]) -> CandidateSet:
        if image is None or image.size == 0:
            logger.warning("Empty image, nothing to extract")
            return []
        if image.ndim != 3 or image.shape[2] != N_CHANNELS:
            raise ValueError(f"expected a {N_CHANNELS}-channel image, got shape {image.shape}")

        smoothed = self.primitives.smooth(image)

        quads: CandidateSet = []
        for channel in range(N_CHANNELS):
            plane = self.primitives.extract_channel(smoothed, channel)
            for level, binary in self._binarise(plane):
                found = self._quads_in(binary, channel, level)
                logger.debug(f"channel={channel} level={level}: {len(found)} quadrilaterals")
                quads.extend(found)

        logger.debug(f"Found {len(quads)} candidate quadrilaterals in total")
        return quads

    def _binarise(self, plane: np.ndarray) -> Iterator[Tuple[int, np.ndarray]]:
        cfg = self.config
        for level in range(cfg.levels):
            if level == 0:
                edges = self.primitives.edge_map(plane, cfg.canny_low, cfg.thresh, cfg.canny_aperture)
                # close small gaps between edge segments
                yield level, self.primitives.dilate(edges)
            else:
                yield level, self.primitives.threshold_at(plane, cfg.threshold_level(level))

    def _quads_in(self, binary: np.ndarray, channel: int, level: int) -> List[Quadrilateral]:
        out: List[Quadrilateral] = []
        for cnt in self.primitives.trace_contours(binary):
            poly = self.primitives.simplify(cnt, self.primitives.perimeter(cnt) * self.config.poly_eps_ratio)
            if self.is_candidate(poly) and not is_image_frame(poly, binary.shape[:2]):
                out.append(Quadrilateral.from_contour(poly, channel=channel, level=level))
        return out

    def is_candidate(self, poly: np.ndarray) -> bool:
        # 4 vertices, above the noise floor, convex
        return (
            len(poly) == 4
            and abs(self.primitives.area(poly)) > self.config.min_area
            and self.primitives.is_convex(poly)
        )


def is_image_frame(poly: np.ndarray, shape: Tuple[int, int]) -> bool:
    # outline traced around a mask with no background pixels
    h, w = shape
    corners = {(0, 0), (0, h - 1), (w - 1, h - 1), (w - 1, 0)}
    return {(int(x), int(y)) for x, y in poly.reshape(-1, 2)} == corners


def find_quadrilaterals(image: Optional[np.ndarray], config: Optional[DetectorConfig] = None) -> CandidateSet:
    return QuadrilateralExtractor(config).extract(image)
