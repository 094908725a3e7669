"""
Tests for frame loading, report rendering, the pipeline and the CLI.
"""

import numpy as np
import pytest

import find_motion
from find_motion.__main__ import main
from find_motion.pipeline import LoggingStatusPort, MonotonicClock, run_motion_estimation
from find_motion.utils.frame_io import read_pnm_image, write_pnm_image, decode_image, to_grayscale
from find_motion.utils.report import format_motion_vectors, format_report, draw_motion_vectors


class RecordingStatusPort:
    def __init__(self):
        self.events = []

    def on(self):
        self.events.append("on")

    def off(self):
        self.events.append("off")


class FakeClock:
    def __init__(self, ticks):
        self.ticks = iter(ticks)

    def usec(self):
        return next(self.ticks)


@pytest.fixture
def frame_files(tmp_path, shifted_pair):
    prev, curr = shifted_pair
    prev_path = write_pnm_image(str(tmp_path / "1.pgm"), prev)
    curr_path = write_pnm_image(str(tmp_path / "2.pgm"), curr)
    return prev_path, curr_path


class TestFrameIO:
    """Test PGM loading and decoding."""

    def test_round_trip(self, tmp_path, textured_frame):
        frame = textured_frame(24, 40)
        path = write_pnm_image(str(tmp_path / "frames" / "a.pgm"), frame)
        loaded = read_pnm_image(path)

        assert loaded.dtype == np.uint8
        assert loaded.shape == (24, 40)
        assert np.array_equal(loaded, frame)

    def test_missing_file(self, tmp_path):
        with pytest.raises(IOError):
            read_pnm_image(str(tmp_path / "missing.pgm"))

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "bad.pgm"
        path.write_bytes(b"this is not an image")
        with pytest.raises(IOError):
            read_pnm_image(str(path))

    def test_decode_bytes(self, tmp_path, textured_frame):
        frame = textured_frame(16, 16)
        path = write_pnm_image(str(tmp_path / "b.pgm"), frame)
        with open(path, "rb") as f:
            assert np.array_equal(decode_image(f.read()), frame)

    def test_decode_garbage(self):
        with pytest.raises(IOError):
            decode_image(b"garbage bytes")

    def test_color_to_grayscale(self):
        image = np.zeros((4, 4, 3), dtype=np.uint8)
        assert to_grayscale(image).shape == (4, 4)


class TestReport:
    """Test text rendering of the field and statistics."""

    def test_field_cells(self):
        field = np.zeros((2, 2, 2), dtype=np.int8)
        field[1, 1] = (-16, 15)
        lines = format_motion_vectors(field).split("\n")

        assert "The motion vector field is as follows:" in lines
        assert "    0,0    0,0" in lines
        assert "    0,0 -16,15" in lines

    def test_statistics_lines(self):
        text = format_report((3.5, 0.0, 12.0), 12345, 67890)

        assert "The motion vectors have a mean of  3.5 pixels." in text
        assert "The motion vectors range between  0.0 and 12.0 pixels." in text
        assert "It took 12 milliseconds to filter the two images." in text
        assert "It took 67 milliseconds to estimate the motion field." in text

    def test_statistics_without_timings(self):
        assert "milliseconds" not in format_report((0.0, 0.0, 0.0))

    def test_draw_arrows(self):
        frame = np.zeros((64, 64), dtype=np.uint8)
        field = np.zeros((8, 8, 2), dtype=np.int8)
        field[3, 3] = (5, 0)
        image = draw_motion_vectors(frame, field, 8, color=(0, 255, 0))

        assert image.shape == (64, 64, 3)
        assert image[24, 26, 1] == 255
        assert image[..., 0].max() == 0


class TestPipeline:
    """Test the denoise, estimate and reduce sequence."""

    def test_status_and_timings(self, shifted_pair):
        prev, curr = shifted_pair
        status = RecordingStatusPort()
        result = run_motion_estimation(prev, curr, status=status, clock=FakeClock([1000, 3000, 7000]),
                                       denoise=False)

        assert status.events == ["on", "off"]
        assert result.filter_usec == 2000
        assert result.estimate_usec == 4000
        assert np.all(result.field[2:8, 2:8] == (3, -2))
        assert result.statistics == find_motion.compute_statistics(result.field)

    def test_denoise_modifies_frames(self, textured_frame):
        prev = textured_frame(64, 64)
        curr = prev.copy()
        original = prev.copy()
        result = run_motion_estimation(prev, curr, status=RecordingStatusPort(), clock=MonotonicClock(),
                                       denoise=True, num_workers=1)

        assert not np.array_equal(prev, original)
        assert np.array_equal(prev, curr)
        assert result.filter_usec >= 0
        assert result.statistics[1] == 0.0

    def test_size_mismatch(self, textured_frame):
        status = RecordingStatusPort()
        with pytest.raises(ValueError, match="do not match"):
            run_motion_estimation(textured_frame(64, 64), textured_frame(72, 64), status=status)
        assert status.events == []

    def test_status_off_after_failure(self, textured_frame):
        status = RecordingStatusPort()
        with pytest.raises(ValueError):
            run_motion_estimation(textured_frame(40, 40), textured_frame(40, 40), status=status, denoise=False)
        assert status.events == ["on", "off"]

    def test_logging_status_port(self):
        port = LoggingStatusPort()
        port.on()
        assert port.active
        port.off()
        assert not port.active

    def test_find_motion_from_files(self, frame_files):
        result = find_motion.find_motion(*frame_files, status=RecordingStatusPort(), denoise=False)
        assert np.all(result.field[2:8, 2:8] == (3, -2))


class TestCommandLine:
    """Test the command-line entry point."""

    def test_prints_field_and_report(self, frame_files, capsys):
        exit_code = main([*frame_files, "--no_denoise", "--workers", "2"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "The motion vector field is as follows:" in out
        assert "   3,-2" in out
        assert "The motion vectors range between  0.0 and  3.6 pixels." in out

    def test_missing_input(self, tmp_path):
        assert main([str(tmp_path / "1.pgm"), str(tmp_path / "2.pgm")]) == 1

    def test_size_mismatch(self, tmp_path, textured_frame):
        prev_path = write_pnm_image(str(tmp_path / "1.pgm"), textured_frame(64, 64))
        curr_path = write_pnm_image(str(tmp_path / "2.pgm"), textured_frame(64, 72))
        assert main([prev_path, curr_path]) == 1
