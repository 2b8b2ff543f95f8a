"""
Tests for the batch detection tool.
"""

import json

from facebox.detect import main

from tests.helpers import make_jpeg


class TestDetectCli:
    def test_prints_json_line_per_image(self, tmp_path, face_detector, capsys):
        first = tmp_path / "first.jpg"
        second = tmp_path / "second.jpg"
        first.write_bytes(make_jpeg(width=32, height=24))
        second.write_bytes(make_jpeg(width=16, height=16))

        status = main([str(first), str(second)], detector=face_detector)

        assert status == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 2
        result = json.loads(lines[0])
        assert result["image"] == str(first)
        assert result["bboxes"][0]["x2"] == 30.0
        assert json.loads(lines[1])["bboxes"][0]["x2"] == 14.0

    def test_writes_overlay(self, tmp_path, face_detector):
        image_path = tmp_path / "face.jpg"
        image_path.write_bytes(make_jpeg())
        out_dir = tmp_path / "out"

        status = main([str(image_path), "--overlay-dir", str(out_dir)], detector=face_detector)

        assert status == 0
        overlay = out_dir / "face_overlay.jpg"
        assert overlay.exists()
        assert overlay.read_bytes()[:2] == b"\xff\xd8"

    def test_bad_image_reported_and_others_processed(self, tmp_path, face_detector, capsys):
        bad = tmp_path / "bad.jpg"
        bad.write_bytes(b"not an image")
        good = tmp_path / "good.jpg"
        good.write_bytes(make_jpeg())
        missing = tmp_path / "missing.jpg"

        status = main([str(bad), str(missing), str(good)], detector=face_detector)

        assert status == 1
        captured = capsys.readouterr()
        assert str(bad) in captured.err
        assert str(missing) in captured.err
        assert len(captured.out.strip().splitlines()) == 1

    def test_missing_model(self, tmp_path, capsys):
        image_path = tmp_path / "face.jpg"
        image_path.write_bytes(make_jpeg())

        status = main([str(image_path), "--model", str(tmp_path / "missing.onnx")])

        assert status == 2
        assert "error" in capsys.readouterr().err
