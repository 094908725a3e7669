import logging
import time
from collections import namedtuple

from find_motion.motion_config import MEDIAN
from find_motion.denoising.median_filter import median3x3
from find_motion.block_matching.block_matching import estimate_motion
from find_motion.motion_statistics.motion_statistics import compute_statistics
from find_motion.utils.frame_io import read_pnm_image

logger = logging.getLogger(__name__)

MotionResult = namedtuple("MotionResult", ["field", "statistics", "filter_usec", "estimate_usec"])


class LoggingStatusPort:
    """Status signal that only logs; stands in for a board LED."""

    def __init__(self):
        self.active = False

    def on(self):
        self.active = True
        logger.info("Status signal on")

    def off(self):
        self.active = False
        logger.info("Status signal off")


class MonotonicClock:
    """Microsecond clock for timing measurements."""

    def usec(self):
        return time.perf_counter_ns() // 1000


def run_motion_estimation(prev_frame, curr_frame, status=None, clock=None, denoise=None, **search_options):
    """
    Denoise two frames in place, estimate the motion field and reduce it.

    Args:
        prev_frame (np.ndarray): Previous frame (uint8, modified when denoising).
        curr_frame (np.ndarray): Current frame (uint8, modified when denoising).
        status: Object with on()/off(), switched on for the computation.
        clock: Object with usec(), used for the timings.
        denoise (bool): Median filter both frames. Defaults to MEDIAN['enabled'].
        search_options: num_workers / show_progress passed to the motion search.

    Returns:
        MotionResult
    """
    status = status or LoggingStatusPort()
    clock = clock or MonotonicClock()
    if denoise is None:
        denoise = MEDIAN['enabled']

    if prev_frame.shape != curr_frame.shape:
        raise ValueError("Image sizes of the two frames do not match!")

    status.on()
    logger.info("Begin motion estimation ...")
    try:
        start = clock.usec()
        if denoise:
            median3x3(prev_frame)
            median3x3(curr_frame)
        filtered = clock.usec()
        field = estimate_motion(prev_frame, curr_frame, **search_options)
        estimated = clock.usec()
    finally:
        status.off()

    statistics = compute_statistics(field)
    logger.info(f"Estimated {field.shape[1]}x{field.shape[0]} motion vectors")
    return MotionResult(field, statistics, filtered - start, estimated - filtered)


def find_motion(prev_path, curr_path, status=None, clock=None, denoise=None, **search_options):
    """Load two frames from disk and run the motion estimation pipeline."""
    prev_frame = read_pnm_image(prev_path)
    curr_frame = read_pnm_image(curr_path)
    logger.info(f"Loaded {prev_path} and {curr_path} ({prev_frame.shape[1]}x{prev_frame.shape[0]})")
    return run_motion_estimation(prev_frame, curr_frame, status=status, clock=clock, denoise=denoise,
                                 **search_options)
