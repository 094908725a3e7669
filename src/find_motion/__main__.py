#!/usr/bin/env python3
"""
Find the 16x16 block-based motion vectors between two grayscale frames
- Both frames are denoised with a 3x3 median filter
- Prints the motion vector field, its statistics and the timings
"""

import argparse
import logging
import sys

from find_motion.motion_config import DEBUG, PERFORMANCE
from find_motion.pipeline import find_motion
from find_motion.utils.report import format_motion_vectors, format_report


def main(argv=None):
    parser = argparse.ArgumentParser(description="Full-search block motion estimation between two frames")
    parser.add_argument("prev", nargs="?", default="1.pgm", help="Previous frame (PGM)")
    parser.add_argument("curr", nargs="?", default="2.pgm", help="Current frame (PGM)")
    parser.add_argument("--no_denoise", action="store_true", help="Skip the 3x3 median filter")
    parser.add_argument("--workers", type=int, default=PERFORMANCE['num_workers'],
                        help="Threads used for the motion search")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--log_level", default=DEBUG['log_level'])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=DEBUG['log_format'])
    logger = logging.getLogger("find_motion")

    try:
        result = find_motion(args.prev, args.curr, denoise=not args.no_denoise,
                             num_workers=max(1, args.workers), show_progress=args.progress)
    except (IOError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1

    print(format_motion_vectors(result.field))
    print(format_report(result.statistics, result.filter_usec, result.estimate_usec))
    return 0


if __name__ == "__main__":
    sys.exit(main())
