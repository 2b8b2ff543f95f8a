import threading
import logging as log
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ...exceptions import EngineRuntimeError, FaceboxError
from .bbox import BBox
from .session_utils import init_face_detector_session, validate_session_signature
from .preprocess import to_engine_input
from .postprocess import from_engine_output

logger = log.getLogger(__name__)


@dataclass(frozen=True)
class Hyperparameters:
    min_size: float = 40.0
    thresholds: Tuple[float, float, float] = (0.6, 0.7, 0.7)
    factor: float = 0.709

    def __post_init__(self):
        if len(self.thresholds) != 3:
            raise ValueError(
                f"Expected 3 cascade thresholds, got {len(self.thresholds)}"
            )


class FaceDetector:
    """
    Long-lived face detection session shared by every request.

    The graph is loaded once; the hyperparameter tensors are built once and
    fed unchanged on every call. ``detect`` serializes the engine run step
    with a lock so callers on any thread can use one instance.
    """

    def __init__(
        self,
        model_path: Optional[str] = None,
        hyperparameters: Optional[Hyperparameters] = None,
        providers: Optional[List[Any]] = None,
        session_options: Optional[Dict[str, Any]] = None,
        session=None,
    ):
        self.model_path = model_path
        self.hyperparameters = hyperparameters or Hyperparameters()

        if session is None:
            self.session = init_face_detector_session(
                model_path, providers, session_options
            )
        else:
            validate_session_signature(session)
            self.session = session

        self._lock = threading.Lock()

        hp = self.hyperparameters
        self._fixed_feeds = {
            "min_size": np.array(hp.min_size, dtype=np.float32),
            "thresholds": np.array(hp.thresholds, dtype=np.float32),
            "factor": np.array(hp.factor, dtype=np.float32),
        }

    def detect(self, image: np.ndarray) -> List[BBox]:
        """
        Detect faces in a raster.

        Args:
            image: Decoded raster (BGR, BGRA or grayscale uint8 array)

        Returns:
            Bounding boxes in engine order

        Raises:
            EngineRuntimeError: if the engine call fails
            MalformedEngineOutput: if the engine outputs are inconsistent
        """
        height, width = image.shape[:2]
        flattened = to_engine_input(image)

        feeds = dict(self._fixed_feeds)
        feeds["input"] = flattened.reshape(height, width, 3)

        try:
            with self._lock:
                box_res, prob_res = self.session.run(["box", "prob"], feeds)
        except Exception as e:
            raise EngineRuntimeError(f"Face detector run failed: {e}") from e

        bboxes = from_engine_output(box_res, prob_res)

        logger.debug(f"BBox Length: {len(bboxes)}, BBoxes: {bboxes}")

        return bboxes

    def warmup(self, size: Tuple[int, int] = (64, 64)) -> None:
        """Run one inference on a blank raster so lazy engine allocations happen up front"""
        width, height = size
        try:
            self.detect(np.zeros((height, width, 3), dtype=np.uint8))
            logger.info("Face detector warmup complete")
        except FaceboxError as e:
            logger.warning(f"Face detector warmup failed: {e}")

    def info(self) -> Dict[str, Any]:
        hp = self.hyperparameters
        return {
            "available": self.session is not None,
            "model_path": str(self.model_path) if self.model_path else None,
            "min_size": hp.min_size,
            "thresholds": list(hp.thresholds),
            "factor": hp.factor,
        }
