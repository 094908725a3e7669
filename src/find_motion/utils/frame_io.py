import os

import cv2
import numpy as np


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """Return a single-channel uint8 frame (BGR input is converted)."""
    if image.ndim == 3:
        image = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    return np.ascontiguousarray(image, dtype=np.uint8)


def read_pnm_image(path: str) -> np.ndarray:
    """
    Reads a grayscale frame from a PGM/PNM file (or any image cv2 can decode).
    Returns a uint8 array of shape (height, width).
    """
    if not os.path.isfile(path):
        raise IOError(f"Cannot read input image {path}: file not found")

    image = cv2.imread(path, cv2.IMREAD_GRAYSCALE)
    if image is None:
        raise IOError(f"Cannot read input image {path}: unsupported or corrupt file")
    return to_grayscale(image)


def decode_image(data: bytes) -> np.ndarray:
    """Decode an in-memory image file (e.g. an upload) into a grayscale frame."""
    buffer = np.frombuffer(data, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_GRAYSCALE)
    if image is None:
        raise IOError("Could not decode image data")
    return to_grayscale(image)


def write_pnm_image(path: str, frame: np.ndarray) -> str:
    """Write a grayscale frame as binary PGM and return the path."""
    output_dir = os.path.dirname(path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    if not cv2.imwrite(path, frame):
        raise IOError(f"Could not write image {path}")
    return path
