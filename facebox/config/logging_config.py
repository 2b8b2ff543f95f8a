import os
from typing import Any, Dict

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(message)s"
)


def get_logging_config() -> Dict[str, Any]:
    level = os.getenv("FACEBOX_LOG_LEVEL", "DEBUG").upper()
    log_file = os.getenv("FACEBOX_LOG_FILE")

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
    }
    app_handlers = ["console"]

    if log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "formatter": "detailed",
            "filename": log_file,
            "mode": "a",
        }
        app_handlers.append("file")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": DEFAULT_FORMAT},
            "detailed": {"format": DETAILED_FORMAT},
        },
        "handlers": handlers,
        "loggers": {
            "": {
                "level": "WARNING",
                "handlers": app_handlers,
            },
            "facebox": {
                "level": level,
                "handlers": app_handlers,
                "propagate": False,
            },
            "uvicorn": {
                "level": "INFO",
                "handlers": app_handlers,
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": app_handlers,
                "propagate": False,
            },
        },
    }
