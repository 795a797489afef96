import numbers
from typing import Any, Callable, Iterable, Optional, Sequence as SequenceT, Tuple

import numpy as np

from schedule_api.schedulers.scheduler import (
    Schedule, ScheduleConfigError, SizeKind, as_schedule, check_step
)


class Sequence(Schedule):
    """
    Concatenation of schedules, each active for a fixed number of steps.

    `schedules[i]` serves `step_sizes[i]` consecutive steps and always sees its
    own window re-based to start at 1. The last schedule never runs out: steps
    past the final boundary keep going to it, still re-based against the end of
    the previous window.

    Example
    -------
    # 1e-3 for 100 steps, then a decay that starts over at t=1
    sched = Sequence([1e-3, decay], [100, 900])
    sched = Sequence((1e-3, 100), (decay, 900))   # same thing

    sched(100)   # -> 1e-3
    sched(101)   # -> decay(1)
    sched(5000)  # -> decay(4900)

    Two arguments are read as parallel sequences unless the first one is a
    2-tuple: `Sequence((1, 2), (10, 20))` means the pairs (1, 2) and (10, 20),
    i.e. 1 for 2 steps then 10 for 20 steps. Pass parallel sequences as lists.
    """
    __slots__ = ("schedules", "step_sizes", "_boundaries")

    def __init__(self, *args):
        if len(args) == 2 and not _is_pair(args[0]):
            schedules, step_sizes = args
        else:
            schedules, step_sizes = _split_pairs(args)

        schedules  = [as_schedule(s) for s in schedules]
        step_sizes = list(step_sizes)

        if len(schedules) == 0:
            raise ScheduleConfigError("Sequence needs at least one schedule")
        if len(schedules) != len(step_sizes):
            raise ScheduleConfigError(
                f"got {len(schedules)} schedules but {len(step_sizes)} step sizes"
            )
        for n in step_sizes:
            if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
                raise ScheduleConfigError(f"step sizes must be integers >= 1, got {n!r}")

        self.schedules  = tuple(schedules)
        self.step_sizes = tuple(int(n) for n in step_sizes)
        self._boundaries = np.cumsum(self.step_sizes)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Any, int]]) -> "Sequence":
        return cls(*list(pairs))

    # -------------------------------------------------------------
    @property
    def boundaries(self) -> Tuple[int, ...]:
        return tuple(int(b) for b in self._boundaries)

    def __len__(self) -> int:
        return len(self.schedules)

    def __call__(self, t):
        check_step(t, "Sequence")
        # number of boundaries strictly below t; a step equal to a boundary
        # still belongs to the window that boundary closes
        k = int(np.searchsorted(self._boundaries, t, side="left"))
        i = min(k, len(self.schedules) - 1)
        toffset = t - int(self._boundaries[i - 1]) if i > 0 else t

        return self.schedules[i](toffset)

    def iterate(self, state: Optional[Tuple[int, int, int]] = None):
        """
        One step of the stage machine. `state` is `(t, i, t0)`: the global step,
        the 0-based active stage and the global step at which that stage began.
        """
        t, i, t0 = (1, 0, 1) if state is None else state
        if i < len(self.step_sizes) - 1 and t >= t0 + self.step_sizes[i]:
            # move onto next step range
            i += 1
            t0 = t

        return self.schedules[i](t - t0 + 1), (t + 1, i, t0)

    @property
    def size_kind(self) -> SizeKind:
        return SizeKind.SIZE_UNKNOWN

    def __repr__(self) -> str:
        stages = ", ".join(f"({s!r}, {n})" for s, n in zip(self.schedules, self.step_sizes))
        return f"Sequence({stages})"


def _is_pair(obj) -> bool:
    return isinstance(obj, tuple) and len(obj) == 2


def _split_pairs(pairs: SequenceT) -> Tuple[list, list]:
    schedules: list[Callable] = []
    step_sizes: list[int] = []
    for pair in pairs:
        if not _is_pair(pair):
            raise ScheduleConfigError(
                f"expected (schedule, step_size) pairs, got {pair!r}"
            )
        schedule, step_size = pair
        schedules.append(schedule)
        step_sizes.append(step_size)
    return schedules, step_sizes
