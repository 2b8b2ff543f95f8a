import os
import logging
from typing import Any, Dict, List, Optional, Sequence

import onnxruntime as ort

from ...exceptions import EngineInitError

logger = logging.getLogger(__name__)

REQUIRED_INPUTS = ("min_size", "thresholds", "factor", "input")
REQUIRED_OUTPUTS = ("box", "prob")


def init_face_detector_session(
    model_path: str,
    providers: Optional[List[Any]] = None,
    session_options: Optional[Dict[str, Any]] = None,
) -> ort.InferenceSession:
    """
    Initialize the ONNX Runtime session for the face detection graph.

    Args:
        model_path: Path to ONNX model file
        providers: List of execution providers (default: CPU)
        session_options: Optional SessionOptions attributes to set

    Returns:
        InferenceSession exposing the named inputs and outputs of the graph

    Raises:
        EngineInitError: if the file is missing, fails to load, or lacks a
            required named input/output
    """
    if not model_path:
        raise EngineInitError("Model path is required for FaceDetector")

    if not os.path.isfile(model_path):
        raise EngineInitError(f"Face detector model file not found: {model_path}")

    providers = providers or ["CPUExecutionProvider"]

    try:
        ort_opts = ort.SessionOptions()

        if session_options:
            for key, value in session_options.items():
                if hasattr(ort_opts, key):
                    setattr(ort_opts, key, value)

        session = ort.InferenceSession(
            model_path, sess_options=ort_opts, providers=providers
        )
    except Exception as e:
        logger.error(f"Error loading face detector model: {e}")
        raise EngineInitError(f"Failed to load face detector model: {e}") from e

    validate_session_signature(session)

    logger.info(f"Face detector model loaded successfully from {model_path}")
    return session


def validate_session_signature(
    session,
    required_inputs: Sequence[str] = REQUIRED_INPUTS,
    required_outputs: Sequence[str] = REQUIRED_OUTPUTS,
) -> None:
    """Check that the graph exposes every named input and output we bind."""
    input_names = {node.name for node in session.get_inputs()}
    output_names = {node.name for node in session.get_outputs()}

    missing = [f"input '{name}'" for name in required_inputs if name not in input_names]
    missing += [
        f"output '{name}'" for name in required_outputs if name not in output_names
    ]

    if missing:
        raise EngineInitError(
            "Face detector graph is missing required operations: " + ", ".join(missing)
        )
