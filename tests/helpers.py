"""
Test doubles and synthetic image builders.
"""

import threading

import cv2
import numpy as np

from facebox.core.models.face_detector.session_utils import (
    REQUIRED_INPUTS,
    REQUIRED_OUTPUTS,
)


class _Node:
    def __init__(self, name):
        self.name = name


def whole_image_result(feeds):
    """One box inset from the image edges, in engine (y1, x1, y2, x2) order."""
    image = feeds["input"]
    height, width = image.shape[:2]
    box = np.array([1, 2, height - 1, width - 2], dtype=np.float32)
    prob = np.array([image.mean() / 255.0], dtype=np.float32)
    return [box, prob]


class FakeEngineSession:
    """Stands in for onnxruntime.InferenceSession in tests."""

    def __init__(
        self,
        result_fn=whole_image_result,
        inputs=REQUIRED_INPUTS,
        outputs=REQUIRED_OUTPUTS,
    ):
        self.result_fn = result_fn
        self.inputs = inputs
        self.outputs = outputs
        self.calls = []
        self._calls_lock = threading.Lock()

    def get_inputs(self):
        return [_Node(name) for name in self.inputs]

    def get_outputs(self):
        return [_Node(name) for name in self.outputs]

    def run(self, output_names, feeds):
        with self._calls_lock:
            self.calls.append((list(output_names), feeds))
        return self.result_fn(feeds)


def make_jpeg(width=32, height=24, value=128):
    image = np.full((height, width, 3), value, dtype=np.uint8)
    ok, buffer = cv2.imencode(".jpg", image)
    assert ok
    return buffer.tobytes()


def with_exif_orientation(jpeg: bytes, orientation: int) -> bytes:
    """Insert a minimal EXIF APP1 segment carrying only an Orientation tag."""
    tiff = (
        b"MM\x00\x2a\x00\x00\x00\x08"  # big-endian header, IFD at offset 8
        + b"\x00\x01"  # one entry
        + b"\x01\x12\x00\x03\x00\x00\x00\x01"  # Orientation, SHORT, count 1
        + orientation.to_bytes(2, "big")
        + b"\x00\x00"
        + b"\x00\x00\x00\x00"  # no next IFD
    )
    payload = b"Exif\x00\x00" + tiff
    app1 = b"\xff\xe1" + (len(payload) + 2).to_bytes(2, "big") + payload
    return jpeg[:2] + app1 + jpeg[2:]
