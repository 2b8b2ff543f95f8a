import logging
from typing import Optional

from fastapi import FastAPI, Request

from . import __version__
from .api.endpoints import router as api_router
from .api.schemas import FaceDetectorInfo, HealthResponse, ModelsResponse
from .core.lifespan import make_lifespan
from .core.models import FaceDetector
from .core.workers import WorkerPool

logger = logging.getLogger(__name__)


def create_app(
    face_detector: Optional[FaceDetector] = None,
    worker_pool: Optional[WorkerPool] = None,
) -> FastAPI:
    app = FastAPI(
        title="facebox",
        description="Face detection over HTTP: bounding boxes or annotated overlays.",
        version=__version__,
        lifespan=make_lifespan(face_detector, worker_pool),
    )

    app.include_router(api_router)

    @app.get("/", response_model=HealthResponse)
    async def root():
        """Health check endpoint"""
        return {"message": "Face Detection API is running", "status": "healthy"}

    @app.get("/models", response_model=ModelsResponse)
    async def get_available_models(request: Request):
        """Get information about the loaded face detector"""
        detector = getattr(request.app.state, "face_detector", None)

        if detector is not None and detector.session is not None:
            info = FaceDetectorInfo(**detector.info())
        else:
            info = FaceDetectorInfo(available=False)

        return {"models": {"face_detector": info.model_dump()}}

    return app


app = create_app()
