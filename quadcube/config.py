from dataclasses import dataclass, replace as _replace


@dataclass(frozen=True)
class DetectorConfig:
    # Canny upper threshold; the lower one stays small to force edge merging
    thresh: int = 50
    # number of passes per colour plane (pass 0 is Canny, the rest threshold)
    levels: int = 5
    canny_low: int = 5
    canny_aperture: int = 5
    blur_ksize: int = 9
    poly_eps_ratio: float = 0.02
    min_area: float = 1000.0
    vertex_tol: float = 1e-6

    def __post_init__(self):
        if self.levels < 1:
            raise ValueError(f"levels must be >= 1, got {self.levels}")
        if self.blur_ksize < 3 or self.blur_ksize % 2 == 0:
            raise ValueError(f"blur_ksize must be odd and >= 3, got {self.blur_ksize}")
        if self.canny_aperture not in (3, 5, 7):
            raise ValueError(f"canny_aperture must be 3, 5 or 7, got {self.canny_aperture}")
        if self.poly_eps_ratio <= 0:
            raise ValueError("poly_eps_ratio must be positive")
        if self.min_area < 0 or self.vertex_tol < 0:
            raise ValueError("min_area and vertex_tol must be non-negative")

    def replace(self, **changes) -> "DetectorConfig":
        """Return a copy with the given fields overridden (None values are ignored)."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return _replace(self, **changes)

    def threshold_level(self, level: int) -> int:
        # intensity cut for pass `level` (> 0), integer arithmetic as in 8-bit planes
        return (level + 1) * 255 // self.levels


DEFAULT_CONFIG = DetectorConfig()
