from .face_detector.detector import FaceDetector, Hyperparameters
from .face_detector.bbox import BBox

__all__ = ["FaceDetector", "Hyperparameters", "BBox"]
