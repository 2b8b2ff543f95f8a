from .detection_service import DetectionService

__all__ = ["DetectionService"]
