"""
End-to-end tests: image in, verdict out.
"""

from quadcube.adjacency import shares_edge
from quadcube.core import analyze_image, detect_cube
from quadcube.config import DetectorConfig

from conftest import STRIPS, strip_corners


def _first_with_corners(quads, corners):
    return next(q for q in quads if set(q.points) == corners)


class TestAnalyzeImage:

    def test_cube_faces_detected(self, cube_faces_image):
        quads, verdict = analyze_image(cube_faces_image)
        assert len(quads) >= 3
        assert verdict.detected
        assert detect_cube(quads)

        i, j, k = verdict.indices
        assert i < j < k
        assert verdict.faces == (quads[i], quads[j], quads[k])
        assert shares_edge(quads[i], quads[j])
        assert shares_edge(quads[i], quads[k]) or shares_edge(quads[j], quads[k])

    def test_faces_form_a_chain(self, cube_faces_image):
        quads, _ = analyze_image(cube_faces_image)
        a, b, c = (_first_with_corners(quads, strip_corners(*STRIPS[ch])) for ch in range(3))
        assert shares_edge(a, b)
        assert shares_edge(b, c)
        assert not shares_edge(a, c)

    def test_single_rectangle(self, single_rect_image):
        quads, verdict = analyze_image(single_rect_image)
        assert quads
        # every pass sees the same rectangle
        assert len({frozenset(q.points) for q in quads}) == 1
        assert not verdict
        assert verdict.indices is None

    def test_dark_image(self, dark_image):
        quads, verdict = analyze_image(dark_image)
        assert quads == []
        assert not verdict

    def test_empty_image(self):
        quads, verdict = analyze_image(None)
        assert quads == []
        assert not verdict

    def test_edges_only_sweep_misses_the_faces(self, cube_faces_image):
        # dilated Canny lines alone are too thin to close into large quads
        quads, verdict = analyze_image(cube_faces_image, DetectorConfig(levels=1))
        assert quads == []
        assert not verdict
