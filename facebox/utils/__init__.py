"""
Image helpers shared by the HTTP service and the batch tool
"""

from .image_utils import decode_image, encode_jpeg, read_image_file
from .overlay import render_overlay, LINE_COLOUR

__all__ = ["decode_image", "encode_jpeg", "read_image_file", "render_overlay", "LINE_COLOUR"]
