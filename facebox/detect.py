"""
Batch face detection over image files.

Uses the same detector, overlay renderer and encoder as the HTTP service,
printing one JSON line per image.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config.settings import FACE_DETECTOR_CONFIG, IMAGE_CONFIG
from .core.exceptions import FaceboxError
from .core.lifespan import build_face_detector
from .utils.image_utils import encode_jpeg, read_image_file
from .utils.overlay import render_overlay

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Detect faces in image files")
    parser.add_argument("images", nargs="+", help="Image files to process")
    parser.add_argument(
        "--overlay-dir",
        type=Path,
        help="Write <name>_overlay.jpg with boxes drawn into this directory",
    )
    parser.add_argument("--model", type=Path, help="Path to the ONNX face detector")
    parser.add_argument("--min-size", type=float, help="Minimum face size in pixels")
    parser.add_argument(
        "--thresholds",
        type=float,
        nargs=3,
        metavar=("P", "R", "O"),
        help="Per-stage cascade thresholds",
    )
    parser.add_argument("--factor", type=float, help="Image pyramid scale factor")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def process_image(detector, path: str, overlay_dir=None) -> dict:
    image = read_image_file(path)
    bboxes = detector.detect(image)

    if overlay_dir is not None:
        overlay_dir.mkdir(parents=True, exist_ok=True)
        out_path = overlay_dir / f"{Path(path).stem}_overlay.jpg"
        out_path.write_bytes(
            encode_jpeg(render_overlay(image, bboxes), IMAGE_CONFIG["jpeg_quality"])
        )
        logger.info(f"Wrote overlay to {out_path}")

    return {"image": path, "bboxes": [bbox.to_dict() for bbox in bboxes]}


def main(argv=None, detector=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if detector is None:
        model_config = dict(FACE_DETECTOR_CONFIG)
        if args.model:
            model_config["model_path"] = args.model
        if args.min_size is not None:
            model_config["min_size"] = args.min_size
        if args.thresholds:
            model_config["thresholds"] = tuple(args.thresholds)
        if args.factor is not None:
            model_config["factor"] = args.factor

        try:
            detector = build_face_detector(model_config)
        except FaceboxError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    status = 0
    for path in args.images:
        try:
            result = process_image(detector, path, args.overlay_dir)
        except (FaceboxError, OSError) as e:
            print(f"{path}: {e}", file=sys.stderr)
            status = 1
            continue

        print(json.dumps(result))

    return status


if __name__ == "__main__":
    sys.exit(main())
