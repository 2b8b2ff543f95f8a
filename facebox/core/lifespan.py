import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from ..config.settings import FACE_DETECTOR_CONFIG, IMAGE_CONFIG, WORKER_CONFIG
from ..services.detection_service import DetectionService
from .models import FaceDetector, Hyperparameters
from .workers import WorkerPool

logger = logging.getLogger(__name__)


def build_face_detector(model_config=None) -> FaceDetector:
    """Construct the process-wide detector from a face_detector model config"""
    model_config = model_config or FACE_DETECTOR_CONFIG

    return FaceDetector(
        model_path=str(model_config["model_path"]),
        hyperparameters=Hyperparameters(
            min_size=model_config["min_size"],
            thresholds=tuple(model_config["thresholds"]),
            factor=model_config["factor"],
        ),
        providers=model_config["providers"],
        session_options=model_config["session_options"],
    )


def make_lifespan(
    face_detector: Optional[FaceDetector] = None,
    worker_pool: Optional[WorkerPool] = None,
):
    """
    Build the app lifespan.

    Whatever is not injected is built from config at startup. Any failure
    here (EngineInitError in particular) aborts startup so the server
    never begins serving without a working detector.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up backend server...")

        try:
            detector = face_detector
            if detector is None:
                detector = build_face_detector()
                if FACE_DETECTOR_CONFIG.get("warmup"):
                    detector.warmup()

            pool = worker_pool or WorkerPool(**WORKER_CONFIG)
        except Exception as e:
            logger.error(f"Failed to initialize models: {e}")
            raise

        app.state.face_detector = detector
        app.state.worker_pool = pool
        app.state.detection_service = DetectionService(
            detector, pool, jpeg_quality=IMAGE_CONFIG["jpeg_quality"]
        )

        logger.info(
            f"Startup complete ({pool.max_workers} workers, queue limit {pool.max_queue})"
        )

        yield

        logger.info("Shutting down...")
        pool.shutdown(wait=False)
        logger.info("Shutdown complete")

    return lifespan
