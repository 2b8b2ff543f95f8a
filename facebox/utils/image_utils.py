"""
Image decoding and encoding helpers
"""

import cv2
import numpy as np

from ..core.exceptions import DecodeError, EncodeError


def decode_image(data: bytes) -> np.ndarray:
    """
    Decode raw image bytes to an OpenCV raster

    Args:
        data: Encoded image in any format OpenCV can read

    Returns:
        OpenCV image as numpy array (BGR format) in stored pixel order;
        any EXIF orientation tag is ignored

    Raises:
        DecodeError: if the bytes are empty or not a decodable image
    """
    if not data:
        raise DecodeError("Request body is empty")

    nparr = np.frombuffer(data, np.uint8)
    try:
        image = cv2.imdecode(
            nparr, cv2.IMREAD_COLOR | cv2.IMREAD_IGNORE_ORIENTATION
        )
    except cv2.error as e:
        raise DecodeError(f"Failed to decode image: {e}") from e

    if image is None or image.size == 0:
        raise DecodeError("Body is not a decodable image")

    return image


def read_image_file(path: str) -> np.ndarray:
    """Load an image from disk, going through the same decoder as uploads"""
    with open(path, "rb") as f:
        return decode_image(f.read())


def encode_jpeg(image: np.ndarray, quality: int = 85) -> bytes:
    """
    Encode an OpenCV raster as JPEG

    Raises:
        EncodeError: if OpenCV cannot encode the raster
    """
    try:
        ok, buffer = cv2.imencode(
            ".jpg", image, [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)]
        )
    except cv2.error as e:
        raise EncodeError(f"Failed to encode image: {e}") from e

    if not ok:
        raise EncodeError("Failed to encode image as JPEG")

    return buffer.tobytes()
