from typing import List, Sequence

import numpy as np

from ...exceptions import MalformedEngineOutput
from .bbox import BBox


def from_engine_output(boxes: Sequence[float], scores: Sequence[float]) -> List[BBox]:
    """
    Parse flat engine outputs into bounding boxes.

    Each 4-tuple in ``boxes`` is ordered (y1, x1, y2, x2), unlike the BBox
    field order. Detections are returned in engine order, unsorted.

    Raises:
        MalformedEngineOutput: if len(boxes) is not exactly 4 * len(scores)
    """
    boxes = np.asarray(boxes, dtype=np.float64).ravel()
    scores = np.asarray(scores, dtype=np.float64).ravel()

    if boxes.size % 4 != 0:
        raise MalformedEngineOutput(
            f"box output length {boxes.size} is not a multiple of 4"
        )
    if boxes.size // 4 != scores.size:
        raise MalformedEngineOutput(
            f"box output holds {boxes.size // 4} boxes but prob output holds "
            f"{scores.size} scores"
        )

    bboxes = []
    for (y1, x1, y2, x2), prob in zip(boxes.reshape(-1, 4).tolist(), scores.tolist()):
        bboxes.append(BBox(x1=x1, y1=y1, x2=x2, y2=y2, prob=prob))

    return bboxes
