"""
Error taxonomy for the detection pipeline.

Every error raised while serving a request derives from FaceboxError so the
route layer can translate it into an HTTP status in one place.
"""


class FaceboxError(Exception):
    """Base class for all facebox errors"""


class DecodeError(FaceboxError):
    """Request body is not a decodable image"""


class EngineInitError(FaceboxError):
    """Inference session could not be constructed"""


class EngineRuntimeError(FaceboxError):
    """A single inference call failed"""


class MalformedEngineOutput(FaceboxError):
    """Engine outputs violate the len(box) == 4 * len(prob) contract"""


class EncodeError(FaceboxError):
    """Annotated raster could not be encoded"""


class WorkerPoolSaturated(FaceboxError):
    """Worker pool has no free slot or queue space"""
