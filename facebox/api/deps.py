from fastapi import HTTPException, Request

from ..services.detection_service import DetectionService


def get_detection_service(request: Request) -> DetectionService:
    service = getattr(request.app.state, "detection_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Face detector not available")
    return service
