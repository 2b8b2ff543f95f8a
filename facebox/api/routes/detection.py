import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from ...config.settings import IMAGE_CONFIG
from ...core.exceptions import (
    DecodeError,
    EncodeError,
    EngineRuntimeError,
    FaceboxError,
    MalformedEngineOutput,
    WorkerPoolSaturated,
)
from ...services.detection_service import DetectionService
from ..deps import get_detection_service
from ..schemas import BBoxSchema

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_STATUS = {
    DecodeError: 400,
    WorkerPoolSaturated: 503,
    MalformedEngineOutput: 500,
    EngineRuntimeError: 500,
    EncodeError: 500,
}


def to_http_exception(error: FaceboxError) -> HTTPException:
    """Map a pipeline error to the HTTP status reported to the client"""
    status_code = 500
    for error_type, code in ERROR_STATUS.items():
        if isinstance(error, error_type):
            status_code = code
            break

    if status_code >= 500:
        logger.error(f"Detection error: {error}", exc_info=error)
    else:
        logger.info(f"Rejected request: {error}")

    return HTTPException(status_code=status_code, detail=str(error))


async def read_image_body(request: Request) -> bytes:
    """Read the raw request body, refusing uploads over the size limit"""
    max_size = IMAGE_CONFIG["max_file_size"]

    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > max_size:
        raise HTTPException(status_code=413, detail="Image exceeds maximum upload size")

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_size:
            raise HTTPException(
                status_code=413, detail="Image exceeds maximum upload size"
            )

    return bytes(body)


@router.post("/bboxes", response_model=List[BBoxSchema])
async def return_bboxes(
    body: bytes = Depends(read_image_body),
    service: DetectionService = Depends(get_detection_service),
):
    """
    Detect faces in the raw image body and return their bounding boxes
    """
    try:
        bboxes = await service.bboxes(body)
    except FaceboxError as e:
        raise to_http_exception(e)

    return [bbox.to_dict() for bbox in bboxes]


@router.post(
    "/overlay",
    response_class=Response,
    responses={200: {"content": {"image/jpeg": {}}}},
)
async def return_overlay(
    body: bytes = Depends(read_image_body),
    service: DetectionService = Depends(get_detection_service),
):
    """
    Detect faces in the raw image body and return a JPEG with the boxes drawn
    """
    try:
        payload = await service.overlay(body)
    except FaceboxError as e:
        raise to_http_exception(e)

    return Response(content=payload, media_type="image/jpeg")
