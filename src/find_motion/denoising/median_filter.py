import cv2
import numpy as np

from find_motion.motion_config import MEDIAN


def neighborhood(buffer, width, row, col):
    """Collect the 3x3 samples around (row, col), top-left to bottom-right."""
    samples = []
    for y in (-1, 0, 1):
        base = (row + y) * width + col
        for x in (-1, 0, 1):
            samples.append(buffer[base + x])
    return samples


def _median_scan(buffer, width, height):
    # Neighbors are read from the live buffer, so pixels to the left and in
    # the previous row have already been replaced by their medians.
    for row in range(1, height - 1):
        for col in range(1, width - 1):
            samples = sorted(neighborhood(buffer, width, row, col))
            buffer[row * width + col] = samples[4]


def _median_snapshot(frame):
    filtered = cv2.medianBlur(frame, 3)
    frame[1:-1, 1:-1] = filtered[1:-1, 1:-1]


def median3x3(frame, in_place_scan=None):
    """
    Remove impulse noise from a grayscale frame with a 3x3 median filter.

    The frame is modified in place; the one-pixel border is left unchanged.

    Args:
        frame (np.ndarray): uint8 image of shape (height, width).
        in_place_scan (bool): If True, scan row-major over the live buffer so
            later pixels see already-filtered neighbors. If False, every
            output pixel is the median of the unfiltered input (cv2.medianBlur).
            Defaults to MEDIAN['in_place_scan'].
    """
    if not isinstance(frame, np.ndarray) or frame.ndim != 2:
        raise ValueError("Frame must be a 2-D grayscale array")
    if frame.dtype != np.uint8:
        raise ValueError(f"Frame must be uint8, got {frame.dtype}")

    height, width = frame.shape
    if height < 3 or width < 3:
        return

    if in_place_scan is None:
        in_place_scan = MEDIAN['in_place_scan']

    if not in_place_scan:
        _median_snapshot(frame)
        return

    # Python ints on a flat list are much faster than per-pixel numpy indexing
    buffer = frame.ravel().tolist()
    _median_scan(buffer, width, height)
    frame[...] = np.asarray(buffer, dtype=np.uint8).reshape(height, width)
