"""
Find Motion
Full-search block motion estimation between two grayscale frames
"""

from .denoising.median_filter import median3x3 as median_filter
from .block_matching.block_matching import estimate_motion
from .motion_statistics.motion_statistics import compute_statistics
from .pipeline import find_motion, run_motion_estimation, MotionResult

__all__ = [
    'median_filter',
    'estimate_motion',
    'compute_statistics',
    'find_motion',
    'run_motion_estimation',
    'MotionResult',
]
