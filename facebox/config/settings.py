import os
from pathlib import Path
from typing import Any, Dict

from .logging_config import get_logging_config
from .models import MODEL_CONFIGS
from .server import get_server_config, get_worker_config

# Image processing configuration
IMAGE_CONFIG = {
    "max_file_size": 10 * 1024 * 1024,  # 10MB
    "jpeg_quality": 85,
}


def get_config() -> Dict[str, Any]:
    """
    Get configuration with environment-specific overrides

    Returns:
        Complete configuration dictionary
    """
    config = {
        "server": get_server_config(),
        "workers": get_worker_config(),
        "models": {name: dict(cfg) for name, cfg in MODEL_CONFIGS.items()},
        "image": IMAGE_CONFIG.copy(),
        "logging": get_logging_config(),
    }

    env = os.getenv("ENVIRONMENT", "development")

    if env == "production":
        config["logging"]["loggers"]["facebox"]["level"] = "INFO"
    elif env == "testing":
        config["models"]["face_detector"]["warmup"] = False

    if os.getenv("FACEBOX_MODEL_PATH"):
        config["models"]["face_detector"]["model_path"] = Path(
            os.getenv("FACEBOX_MODEL_PATH")
        )

    return config


config = get_config()

FACE_DETECTOR_CONFIG = config["models"]["face_detector"]
FACE_DETECTOR_MODEL_PATH = FACE_DETECTOR_CONFIG["model_path"]
WORKER_CONFIG = config["workers"]
