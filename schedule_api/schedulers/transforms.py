from typing import Callable


def reverse(f: Callable, period) -> Callable:
    """Return a function such that `reverse(f, period)(t) == f(period - t)`."""
    return lambda t: f(period - t)


def symmetric(f: Callable, period) -> Callable:
    """
    Return a function equal to `f(t)` for t < period / 2 and to
    `f(period - t)` from period / 2 on (the midpoint takes the mirrored branch).
    """
    half = period / 2
    return lambda t: f(t) if t < half else f(period - t)
