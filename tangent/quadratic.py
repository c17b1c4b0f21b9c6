"""Quadratic f(p) = a*p^2 + b*p + c and its derivative.

Both functions work on Python floats and on numpy arrays; the operations
run in the same order either way so the results agree bit for bit.
"""


def func(a, b, c, p):
    """Evaluate a*p^2 + b*p + c with Horner's rule."""
    fval = a
    fval = fval * p + b
    fval = fval * p + c
    return fval


def func_prime(a, b, p):
    """Slope of the quadratic at p: 2*a*p + b."""
    slopeval = 2.0 * a
    slopeval = slopeval * p + b
    return slopeval
