import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from tqdm import tqdm

from find_motion.motion_config import MATCHING, MSTEP, PERFORMANCE
from .utils import match

logger = logging.getLogger(__name__)


def motion_grid_shape(width, height):
    """Number of motion vectors per frame as (nx, ny)."""
    return width // MSTEP, height // MSTEP


def estimable_range(n):
    """Grid indices along one axis that get a motion vector."""
    return range(MATCHING['margin_near'], n - MATCHING['margin_far'])


def _check_frames(prev_frame, curr_frame):
    for name, frame in (("previous", prev_frame), ("current", curr_frame)):
        if not isinstance(frame, np.ndarray) or frame.ndim != 2:
            raise ValueError(f"The {name} frame must be a 2-D grayscale array")
        if frame.dtype != np.uint8:
            raise ValueError(f"The {name} frame must be uint8, got {frame.dtype}")
    if prev_frame.shape != curr_frame.shape:
        raise ValueError(
            f"Image sizes of the two frames do not match: "
            f"{prev_frame.shape[1]}x{prev_frame.shape[0]} vs {curr_frame.shape[1]}x{curr_frame.shape[0]}"
        )
    height, width = prev_frame.shape
    nx, ny = motion_grid_shape(width, height)
    if len(estimable_range(nx)) == 0 or len(estimable_range(ny)) == 0:
        raise ValueError(f"Frames of {width}x{height} are too small for a full-search window")


def full_search(prev_frame, curr_frame, num_workers=None, show_progress=None):
    """
    Full-search motion vectors of `curr_frame` with respect to `prev_frame`.

    Vectors are computed on a grid with MSTEP spacing. Cells within the near
    and far margins are not estimated and keep the zero vector.

    Args:
        prev_frame (np.ndarray): Previous uint8 frame (height, width).
        curr_frame (np.ndarray): Current uint8 frame, same shape.
        num_workers (int): Threads across grid rows. Defaults to PERFORMANCE['num_workers'].
        show_progress (bool): Show a tqdm bar over grid rows.

    Returns:
        np.ndarray: int8 motion field of shape (ny, nx, 2) holding (x, y) per cell.
    """
    if num_workers is None:
        num_workers = PERFORMANCE['num_workers']
    if show_progress is None:
        show_progress = PERFORMANCE['show_progress']

    height, width = prev_frame.shape
    nx, ny = motion_grid_shape(width, height)
    field = np.zeros((ny, nx, 2), dtype=np.int8)

    rows = estimable_range(ny)
    cols = estimable_range(nx)
    logger.debug(f"Full search: {len(cols)}x{len(rows)} of {nx}x{ny} vectors, {num_workers} worker(s)")

    def search_row(idy):
        vectors = []
        for idx in cols:
            x, y, _ = match(idx * MSTEP, idy * MSTEP, prev_frame, curr_frame, width)
            vectors.append((idx, x, y))
        return idy, vectors

    if num_workers > 1:
        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            results = executor.map(search_row, rows)
            results = tqdm(results, total=len(rows), desc="Motion search", disable=not show_progress)
            for idy, vectors in results:
                for idx, x, y in vectors:
                    field[idy, idx] = (x, y)
    else:
        for idy in tqdm(rows, desc="Motion search", disable=not show_progress):
            _, vectors = search_row(idy)
            for idx, x, y in vectors:
                field[idy, idx] = (x, y)

    return field


def estimate_motion(prev_frame, curr_frame, **kwargs):
    """Validate two equal-sized frames and return their motion field."""
    _check_frames(prev_frame, curr_frame)
    return full_search(prev_frame, curr_frame, **kwargs)
