"""
Shared fixtures: synthetic images and hand-built quadrilaterals.
"""

import numpy as np
import pytest

from quadcube.types import Quadrilateral

H, W = 200, 400

# Stand-in for a rendered cube with three visible faces: three full-height
# strips, one per colour plane. Neighbouring strips overlap on one pixel
# column, so their outlines share two corners exactly, giving the chain a-b,
# b-c that the cube search accepts. Touching the top and bottom border keeps
# the corners square through the median blur. An isometric cube drawn with
# fillPoly or as a wireframe is not used: the blur rounds its corners and
# faces traced on opposite sides of a shared edge never land on the same
# pixels, so the exact vertex match fails on it.
STRIPS = {
    0: (50, 150),
    1: (150, 250),
    2: (250, 350),
}


def strip_corners(x0, x1):
    return {(x0, 0), (x0, H - 1), (x1, 0), (x1, H - 1)}


@pytest.fixture
def cube_faces_image():
    img = np.zeros((H, W, 3), dtype=np.uint8)
    for channel, (x0, x1) in STRIPS.items():
        img[:, x0:x1 + 1, channel] = 255
    return img


@pytest.fixture
def single_rect_image():
    img = np.zeros((H, W, 3), dtype=np.uint8)
    img[:, 100:201, 2] = 255
    return img


@pytest.fixture
def dark_image():
    return np.full((H, W, 3), 50, dtype=np.uint8)


@pytest.fixture
def projected_cube():
    """Top, left and right faces of an isometric cube meeting at (200, 200)."""
    top = Quadrilateral(((200, 200), (300, 150), (200, 100), (100, 150)))
    left = Quadrilateral(((100, 150), (200, 200), (200, 300), (100, 250)))
    right = Quadrilateral(((200, 200), (300, 150), (300, 250), (200, 300)))
    return top, left, right


def square(x, y, size=100):
    return Quadrilateral(((x, y), (x + size, y), (x + size, y + size), (x, y + size)))
