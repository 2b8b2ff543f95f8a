import math
import logging
from typing import Optional, Sequence, Tuple

import cv2
import numpy as np

from ..core.models.face_detector.bbox import BBox

logger = logging.getLogger(__name__)

# Green in both BGR and RGB order
LINE_COLOUR = (0, 255, 0)


def box_to_rect(bbox: BBox) -> Optional[Tuple[int, int, int, int]]:
    """
    Convert a bounding box into an integer (x, y, width, height) rect.

    Coordinates and extents are truncated toward zero. Boxes with a
    non-positive width or height, or any non-finite coordinate, yield None
    and are not drawn.
    """
    coords = (bbox.x1, bbox.y1, bbox.x2, bbox.y2)
    if not all(math.isfinite(c) for c in coords):
        return None

    width = int(bbox.x2 - bbox.x1)
    height = int(bbox.y2 - bbox.y1)
    if width <= 0 or height <= 0:
        return None

    return int(bbox.x1), int(bbox.y1), width, height


def render_overlay(image: np.ndarray, bboxes: Sequence[BBox]) -> np.ndarray:
    """
    Draw a hollow rectangle for every box onto a copy of ``image``.

    Boxes are drawn in sequence order, later ones overdrawing earlier ones.
    The caller's raster is never modified.
    """
    output_image = image.copy()
    img_height, img_width = output_image.shape[:2]

    colour = LINE_COLOUR
    if output_image.ndim == 3 and output_image.shape[2] == 4:
        colour = LINE_COLOUR + (255,)

    for bbox in bboxes:
        rect = box_to_rect(bbox)
        if rect is None:
            logger.debug(f"Skipping degenerate bounding box: {bbox}")
            continue

        x, y, width, height = rect
        # Edges parked one pixel outside the raster are clipped away by
        # OpenCV, keeping far off-image corners inside int32 range.
        left = _clamp(x, -1, img_width)
        top = _clamp(y, -1, img_height)
        right = _clamp(x + width - 1, -1, img_width)
        bottom = _clamp(y + height - 1, -1, img_height)

        cv2.rectangle(output_image, (left, top), (right, bottom), colour, thickness=1)

    return output_image


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))
