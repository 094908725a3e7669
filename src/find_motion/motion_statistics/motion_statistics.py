import numpy as np

from .utils import quick_sqrt


def vector_magnitudes(field):
    """Approximate length of every motion vector, shaped like the grid."""
    vectors = np.asarray(field, dtype=np.int32)
    squared = (vectors[..., 0] ** 2 + vectors[..., 1] ** 2).astype(np.float32)
    return quick_sqrt(squared)


def compute_statistics(field):
    """
    Mean, minimum and maximum motion vector length over the whole field.

    Margin vectors that were never estimated count as zero-length entries.
    Both extremes start at zero, so the reported minimum is always 0.

    Args:
        field (np.ndarray): Motion field of shape (ny, nx, 2).

    Returns:
        tuple: (mean, min, max) as floats.
    """
    field = np.asarray(field)
    if field.ndim < 1 or field.shape[-1] != 2:
        raise ValueError("Motion field must hold (x, y) pairs in its last axis")
    if field.size == 0:
        raise ValueError("Cannot compute statistics of an empty motion field")

    lengths = np.ravel(vector_magnitudes(field))

    minimum = min(0.0, float(lengths.min()))
    maximum = max(0.0, float(lengths.max()))
    total = np.sum(lengths, dtype=np.float32)
    mean = float(total / np.float32(lengths.size))
    return mean, minimum, maximum
