from .paths import MODELS_DIR
from .onnx import OPTIMIZED_PROVIDERS, OPTIMIZED_SESSION_OPTIONS

MODEL_CONFIGS = {
    "face_detector": {
        "model_path": MODELS_DIR / "mtcnn.onnx",
        "min_size": 40.0,
        "thresholds": (0.6, 0.7, 0.7),
        "factor": 0.709,
        "providers": OPTIMIZED_PROVIDERS,
        "session_options": OPTIMIZED_SESSION_OPTIONS,
        "warmup": True,
    },
}


def validate_model_paths(model_configs=None):
    missing_models = []
    for model_name, model_config in (model_configs or MODEL_CONFIGS).items():
        if "model_path" not in model_config:
            continue
        model_path = model_config["model_path"]
        if not model_path.exists():
            missing_models.append(f"{model_name}: {model_path}")
    if missing_models:
        raise FileNotFoundError("Missing model files:\n" + "\n".join(missing_models))
