from typing import Sequence
import matplotlib.pyplot as plt
import numpy as np
import cv2
from .types import CubeVerdict, Quadrilateral

QUAD_COLOR = (0, 255, 0)
FACE_COLOR = (0, 0, 255)
LABEL = "Cube Detected"


def draw_quadrilaterals(image_bgr: np.ndarray, quads: Sequence[Quadrilateral],
                        color: tuple = QUAD_COLOR, thickness: int = 3) -> np.ndarray:
    vis = image_bgr.copy()
    for q in quads:
        x0, y0 = q.points[0]
        # skip outlines hugging the image border (usually the frame itself)
        if x0 <= 3 or y0 <= 3:
            continue
        cv2.polylines(vis, [q.as_contour()], True, color, thickness, cv2.LINE_AA)
    return vis


def draw_verdict(image_bgr: np.ndarray, verdict: CubeVerdict) -> np.ndarray:
    vis = image_bgr.copy()
    if not verdict:
        return vis

    for q in verdict.faces or ():
        cv2.polylines(vis, [q.as_contour()], True, FACE_COLOR, 2, cv2.LINE_AA)
    cv2.putText(vis, LABEL, (30, 30), cv2.FONT_HERSHEY_SIMPLEX, 1, FACE_COLOR, 2)
    return vis


def render_result(image_bgr: np.ndarray, quads: Sequence[Quadrilateral], verdict: CubeVerdict) -> np.ndarray:
    return draw_verdict(draw_quadrilaterals(image_bgr, quads), verdict)


def show_result(vis_bgr: np.ndarray, title: str) -> None:
    vis_rgb = cv2.cvtColor(vis_bgr, cv2.COLOR_BGR2RGB)
    plt.figure(figsize=(10, 8))
    plt.imshow(vis_rgb)
    plt.title(title)
    plt.axis("off")
    plt.show()
