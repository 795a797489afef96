from itertools import islice
from typing import Callable

import numpy as np
# ──────────────────────────────────────────────────────────────
#  Fast fail-safe checks for schedules
# ──────────────────────────────────────────────────────────────
def assert_iteration_agrees(name: str, schedule: Callable, n_steps: int):
    """
    Check that iterating `schedule` yields exactly schedule(1..n_steps).
    Raises AssertionError with `name` and the first disagreeing step.
    """
    for t, value in enumerate(islice(iter(schedule), n_steps), start=1):
        expected = schedule(t)
        if value != expected:
            raise AssertionError(
                f"[{name}] step {t}: iteration gave {value!r}, direct call gave {expected!r}"
            )


def assert_finite(name: str, *values):
    """
    Fail-fast check that every scheduled value is finite.
    Raises ValueError with `name` if a NaN or Inf is found.
    """
    for v in values:
        if not np.isfinite(np.asarray(v, dtype=float)).all():
            raise ValueError(f"non-finite detected in [{name}]: {v!r}")
