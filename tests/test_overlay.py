"""
Tests for overlay rendering.
"""

import math

import numpy as np
import pytest

from facebox.core.models import BBox
from facebox.utils.overlay import LINE_COLOUR, box_to_rect, render_overlay

GREEN = list(LINE_COLOUR)
BLACK = [0, 0, 0]


def blank(height=20, width=20):
    return np.zeros((height, width, 3), dtype=np.uint8)


def box(x1, y1, x2, y2, prob=0.9):
    return BBox(x1=x1, y1=y1, x2=x2, y2=y2, prob=prob)


class TestBoxToRect:
    def test_truncates(self):
        assert box_to_rect(box(2.9, 3.7, 12.95, 9.8)) == (2, 3, 10, 6)

    def test_zero_width(self):
        assert box_to_rect(box(5, 5, 5.5, 10)) is None

    def test_negative_extent(self):
        assert box_to_rect(box(10, 10, 2, 2)) is None

    def test_non_finite(self):
        assert box_to_rect(box(math.nan, 0, 10, 10)) is None
        assert box_to_rect(box(0, 0, math.inf, 10)) is None


class TestRenderOverlay:
    def test_no_boxes_is_plain_copy(self):
        image = np.random.default_rng(0).integers(0, 256, (16, 12, 3), dtype=np.uint8)

        output = render_overlay(image, [])

        assert output is not image
        assert output.tobytes() == image.copy().tobytes()

    def test_does_not_mutate_input(self):
        image = blank()
        render_overlay(image, [box(2, 3, 12, 9)])
        assert not image.any()

    def test_draws_hollow_outline(self):
        output = render_overlay(blank(), [box(2, 3, 12, 9)])

        # rect spans x 2..11, y 3..8
        assert output[3, 2].tolist() == GREEN
        assert output[3, 11].tolist() == GREEN
        assert output[8, 2].tolist() == GREEN
        assert output[8, 11].tolist() == GREEN
        assert output[5, 2].tolist() == GREEN
        assert output[3, 6].tolist() == GREEN
        assert output[5, 6].tolist() == BLACK
        assert output[3, 12].tolist() == BLACK
        assert output[9, 2].tolist() == BLACK

    def test_deterministic(self):
        image = np.random.default_rng(1).integers(0, 256, (30, 40, 3), dtype=np.uint8)
        boxes = [box(1, 1, 20, 20), box(10.5, 5.2, 35.9, 28.1)]

        first = render_overlay(image, boxes)
        second = render_overlay(image, boxes)

        assert first.tobytes() == second.tobytes()

    @pytest.mark.parametrize(
        "bbox",
        [
            box(10, 10, 2, 2),
            box(5, 5, 5, 15),
            box(5, 5, 15, 5),
            box(math.nan, 1, 5, 5),
            box(1, 1, math.inf, 5),
        ],
    )
    def test_degenerate_draws_nothing(self, bbox):
        output = render_overlay(blank(), [bbox])
        assert not output.any()

    def test_degenerate_does_not_block_others(self):
        output = render_overlay(blank(), [box(10, 10, 2, 2), box(2, 3, 12, 9)])
        assert output[3, 2].tolist() == GREEN

    def test_fully_off_image(self):
        output = render_overlay(blank(), [box(-1e12, -1e12, 1e12, 1e12)])
        assert not output.any()

    def test_partially_off_image(self):
        output = render_overlay(blank(), [box(-5, -5, 10, 10)])

        # Only the right and bottom edges (x=9, y=9) are inside the raster
        assert output[0, 9].tolist() == GREEN
        assert output[9, 0].tolist() == GREEN
        assert output[0, 0].tolist() == BLACK

    def test_later_boxes_overdraw(self):
        image = blank()
        output = render_overlay(image, [box(2, 2, 10, 10), box(2, 2, 10, 10)])
        assert output.tobytes() == render_overlay(image, [box(2, 2, 10, 10)]).tobytes()

    def test_bgra_raster(self):
        image = np.zeros((10, 10, 4), dtype=np.uint8)

        output = render_overlay(image, [box(1, 1, 8, 8)])

        assert output[1, 1].tolist() == [0, 255, 0, 255]
        assert not image.any()
