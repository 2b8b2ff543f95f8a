import logging
import time
import uuid
from typing import List, Tuple

import numpy as np

from ..core.models import BBox, FaceDetector
from ..core.workers import WorkerPool
from ..utils.image_utils import decode_image, encode_jpeg
from ..utils.overlay import render_overlay

logger = logging.getLogger(__name__)


class DetectionService:
    """
    Per-request orchestration for the detection endpoints.

    A request moves through Received -> Decoding -> Detecting ->
    [Rendering] -> Encoding -> Responded, or to Failed from any stage.
    Every CPU-bound stage is offloaded to the worker pool; errors from any
    stage propagate to the caller unchanged.
    """

    def __init__(
        self, face_detector: FaceDetector, worker_pool: WorkerPool, jpeg_quality: int = 85
    ):
        self.face_detector = face_detector
        self.worker_pool = worker_pool
        self.jpeg_quality = jpeg_quality

    async def bboxes(self, body: bytes) -> List[BBox]:
        """Decode an uploaded image and return its detections"""
        request_id = uuid.uuid4().hex[:8]
        start_time = time.time()

        try:
            _, bboxes = await self._decode_and_detect(request_id, body)
        except Exception as e:
            logger.debug(f"[{request_id}] Failed: {type(e).__name__}: {e}")
            raise

        logger.debug(
            f"[{request_id}] Responded: {len(bboxes)} boxes in "
            f"{(time.time() - start_time) * 1000:.1f}ms"
        )
        return bboxes

    async def overlay(self, body: bytes) -> bytes:
        """Decode an uploaded image and return it as a JPEG with detections drawn"""
        request_id = uuid.uuid4().hex[:8]
        start_time = time.time()

        try:
            image, bboxes = await self._decode_and_detect(request_id, body)

            logger.debug(f"[{request_id}] Rendering")
            annotated = await self.worker_pool.offload(render_overlay, image, bboxes)

            logger.debug(f"[{request_id}] Encoding")
            payload = await self.worker_pool.offload(
                encode_jpeg, annotated, self.jpeg_quality
            )
        except Exception as e:
            logger.debug(f"[{request_id}] Failed: {type(e).__name__}: {e}")
            raise

        logger.debug(
            f"[{request_id}] Responded: {len(payload)} bytes in "
            f"{(time.time() - start_time) * 1000:.1f}ms"
        )
        return payload

    async def _decode_and_detect(
        self, request_id: str, body: bytes
    ) -> Tuple[np.ndarray, List[BBox]]:
        logger.debug(f"[{request_id}] Received {len(body)} bytes")

        logger.debug(f"[{request_id}] Decoding")
        image = await self.worker_pool.offload(decode_image, body)

        logger.debug(f"[{request_id}] Detecting on {image.shape[1]}x{image.shape[0]}")
        bboxes = await self.worker_pool.offload(self.face_detector.detect, image)

        return image, bboxes
