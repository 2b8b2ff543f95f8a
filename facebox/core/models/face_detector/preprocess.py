import numpy as np


def to_engine_input(image: np.ndarray) -> np.ndarray:
    """
    Flatten a raster into the engine's input layout.

    Rasters are OpenCV arrays, so samples are already stored B, G, R per
    pixel in row-major order. A fourth (alpha) channel is dropped and a
    2-D grayscale raster is expanded to three equal channels.

    Args:
        image: uint8 array shaped (H, W), (H, W, 3) or (H, W, 4)

    Returns:
        1-D float32 array of length H * W * 3
    """
    if image.ndim == 2:
        bgr = np.repeat(image[:, :, np.newaxis], 3, axis=2)
    elif image.ndim == 3 and image.shape[2] in (3, 4):
        bgr = image[:, :, :3]
    else:
        raise ValueError(f"Unsupported raster shape: {image.shape}")

    return np.ascontiguousarray(bgr, dtype=np.float32).reshape(-1)
