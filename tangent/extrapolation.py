"""Tangent-line extrapolation of a quadratic over a run of offsets."""

import numpy as np

from quadratic import func, func_prime


STEP_LIMIT = 1000     # number of extrapolation steps
STEP_SIZE = 0.001     # increment applied to h at each step


def extrapolate(a, b, c, x, h):
    """Estimate f(x + h) from f(x) and the slope sampled at x + h.

    Note the slope is taken at the offset point, not at x. The error of
    the estimate is therefore -a*h^2 rather than the textbook +a*h^2.
    """
    slope = func_prime(a, b, x + h)
    vchange = h * slope
    return func(a, b, c, x) + vchange


def step_offsets(steps=STEP_LIMIT, step_size=STEP_SIZE):
    """Offsets 0, s, s+s, ... built by repeated addition.

    cumsum accumulates left to right, so each value matches `h = h + s`
    in a loop exactly (i * s would round differently).
    """
    increments = np.full(steps, step_size, dtype=np.float64)
    increments[:1] = 0.0
    return np.cumsum(increments)


def tabulate(a, b, c, x, steps=STEP_LIMIT, step_size=STEP_SIZE):
    """Build the extrapolation table.

    Args:
        a, b, c: quadratic coefficients
        x: base point
        steps: number of rows
        step_size: increment between consecutive offsets

    Returns:
        array of shape (steps, 4) with columns
        (x + h, approximation, f(x + h), error)
    """
    h = step_offsets(steps, step_size)
    with np.errstate(all="ignore"):
        position = x + h
        approx = extrapolate(a, b, c, x, h)
        direct = func(a, b, c, position)
        error = direct - approx
    return np.column_stack((position, approx, direct, error))
