from pathlib import Path


def get_base_dir() -> Path:
    """Get the package directory holding read-only resources."""
    return Path(__file__).resolve().parent.parent


BASE_DIR = get_base_dir()
MODELS_DIR = BASE_DIR / "assets" / "models"
