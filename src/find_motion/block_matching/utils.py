import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from find_motion.motion_config import BSIZE, MATCHING

SEARCH_RANGE = MATCHING['search_range']


def _as_rows(buffer, width):
    """View a flat row-major pixel buffer (or a 2-D frame) as rows of `width`."""
    return np.asarray(buffer).reshape(-1, width)


def compute_sad(prev, curr, width, px, py, cx, cy):
    """
    Sum of absolute differences between the BSIZE x BSIZE block of `prev`
    anchored at (px, py) and the block of `curr` anchored at (cx, cy).

    No bounds checking: the caller keeps both blocks inside the buffers.
    """
    prev_block = _as_rows(prev, width)[py:py + BSIZE, px:px + BSIZE].astype(np.int32)
    curr_block = _as_rows(curr, width)[cy:cy + BSIZE, cx:cx + BSIZE].astype(np.int32)
    return int(np.sum(np.abs(prev_block - curr_block)))


def sad_surface(posx, posy, prev, curr, width):
    """
    Matching cost of every displacement in the search window.

    Returns:
        np.ndarray: int32 costs of shape (2R, 2R), where R is the search range,
        indexed [mvy + R, mvx + R] for mvx, mvy in [-R, R - 1].
    """
    span = 2 * SEARCH_RANGE + BSIZE - 1
    window = _as_rows(prev, width)[posy - SEARCH_RANGE:posy - SEARCH_RANGE + span,
                                   posx - SEARCH_RANGE:posx - SEARCH_RANGE + span]
    candidates = sliding_window_view(window, (BSIZE, BSIZE)).astype(np.int32)
    block = _as_rows(curr, width)[posy:posy + BSIZE, posx:posx + BSIZE].astype(np.int32)
    return np.abs(candidates - block).sum(axis=(2, 3), dtype=np.int32)


def match(posx, posy, prev, curr, width):
    """
    Full search for the block of `curr` at (posx, posy) inside `prev`.

    Candidates are visited with mvy ascending in the outer loop and mvx
    ascending in the inner loop, and a candidate replaces the best one when
    its cost is less than or equal to it. On ties the last visited
    displacement wins.

    Returns:
        tuple: (mvx, mvy, min_sad)
    """
    costs = sad_surface(posx, posy, prev, curr, width).ravel()

    # Last occurrence of the minimum in raster order
    best = costs.size - 1 - int(np.argmin(costs[::-1]))
    mvy, mvx = divmod(best, 2 * SEARCH_RANGE)
    return mvx - SEARCH_RANGE, mvy - SEARCH_RANGE, int(costs[best])
