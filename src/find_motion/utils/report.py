import cv2
import numpy as np

CELL_WIDTH = 7


def format_motion_vectors(field):
    """Render the motion field as rows of right-aligned "x,y" tokens."""
    lines = ["", "The motion vector field is as follows:", ""]
    for row in np.asarray(field):
        lines.append("".join(f"{f'{int(x)},{int(y)}':>{CELL_WIDTH}}" for x, y in row))
    lines.append("")
    return "\n".join(lines)


def format_report(statistics, filter_usec=None, estimate_usec=None):
    """Summary lines for the statistics and, when measured, the timings."""
    mean, minimum, maximum = statistics
    lines = [
        f"The motion vectors have a mean of {mean:4.1f} pixels.",
        f"The motion vectors range between {minimum:4.1f} and {maximum:4.1f} pixels.",
    ]
    if filter_usec is not None:
        lines.append(f"It took {filter_usec // 1000} milliseconds to filter the two images.")
    if estimate_usec is not None:
        lines.append(f"It took {estimate_usec // 1000} milliseconds to estimate the motion field.")
    return "\n".join(lines)


def draw_motion_vectors(frame, field, step, scale=1, color=(0, 255, 0), thickness=1):
    """
    Draw each nonzero motion vector as an arrow at its block anchor.

    Args:
        frame: Background frame (grayscale or BGR)
        field: Motion field of shape (ny, nx, 2)
        step: Grid spacing in pixels
        scale: Arrow length multiplier

    Returns:
        BGR image with arrows
    """
    if frame.ndim == 2:
        result = cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
    else:
        result = frame.copy()

    for idy, row in enumerate(np.asarray(field, dtype=np.int32)):
        for idx, (x, y) in enumerate(row):
            if x == 0 and y == 0:
                continue
            start = (idx * step, idy * step)
            end = (int(idx * step + x * scale), int(idy * step + y * scale))
            cv2.arrowedLine(result, start, end, color, thickness, tipLength=0.3)

    return result
