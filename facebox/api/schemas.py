"""API Schemas"""

from typing import List, Optional

from pydantic import BaseModel


class BBoxSchema(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float
    prob: float


class HealthResponse(BaseModel):
    message: str
    status: str


class FaceDetectorInfo(BaseModel):
    available: bool
    model_path: Optional[str] = None
    min_size: Optional[float] = None
    thresholds: Optional[List[float]] = None
    factor: Optional[float] = None


class ModelsResponse(BaseModel):
    models: dict
