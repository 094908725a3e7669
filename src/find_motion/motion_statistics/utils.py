import numpy as np

# Initial guess constant for the inverse square root bit trick
MAGIC = np.int32(0x5F375A86)
NEWTON_STEPS = 3


def quick_sqrt(x):
    """
    Approximate square root through the fast inverse square root.

    The float32 bit pattern of `x` seeds 1/sqrt(x) with MAGIC - (bits >> 1),
    three Newton-Raphson steps refine it, and the reciprocal is returned.
    Relative error is far below 0.2% for positive inputs. Zero maps to 0.

    Args:
        x (float or np.ndarray): Non-negative value(s).

    Returns:
        float for scalar input, np.ndarray of float32 otherwise.
    """
    values = np.atleast_1d(np.asarray(x, dtype=np.float32))
    xhalf = np.float32(0.5) * values

    bits = values.view(np.int32)
    bits = MAGIC - (bits >> 1)
    y = bits.view(np.float32)
    for _ in range(NEWTON_STEPS):
        y = y * (np.float32(1.5) - xhalf * y * y)

    root = np.where(values > 0, np.float32(1.0) / y, np.float32(0.0)).astype(np.float32)
    if np.ndim(x) == 0:
        return float(root[0])
    return root.reshape(np.shape(x))
