import numbers
from typing import Callable, Optional

from schedule_api.schedulers.scheduler import (
    Schedule, ScheduleConfigError, SizeKind,
    as_schedule, check_step, element_type_of, mod1, size_kind_of
)


class Loop(Schedule):
    """
    Repeat `f` every `period` steps.

    `f` is evaluated on the 1-based window [1, period], so
    Loop(f, 10)(10) == f(10) and Loop(f, 10)(11) == f(1).
    Looping always yields an infinite schedule.
    """
    __slots__ = ("f", "period")

    def __init__(self, f: Callable, period: int):
        if isinstance(period, bool) or not isinstance(period, numbers.Integral) or period < 1:
            raise ScheduleConfigError(f"period must be an integer >= 1, got {period!r}")

        self.f      = as_schedule(f)
        self.period = int(period)

    def __call__(self, t):
        check_step(t, "Loop")
        return self.f(mod1(t, self.period))

    @property
    def size_kind(self) -> SizeKind:
        return SizeKind.INFINITE

    @property
    def element_type(self) -> Optional[type]:
        return element_type_of(self.f)

    def __repr__(self) -> str:
        return f"Loop({self.f!r}, period={self.period})"


class Interpolator(Schedule):
    """
    A schedule whose output is `schedule(t / rate)`.

    Useful when the training loop advances over real numbers at a fixed rate
    (e.g. a fixed time step solver) but `schedule` is defined on integers, or
    to write `schedule` in epochs while stepping it once per mini-batch
    (rate = batches per epoch).
    """
    __slots__ = ("schedule", "rate")

    def __init__(self, schedule: Callable, rate):
        if rate == 0:
            raise ScheduleConfigError("rate must be non-zero")

        self.schedule = as_schedule(schedule)
        self.rate     = rate

    def __call__(self, t):
        return self.schedule(t / self.rate)

    @property
    def size_kind(self) -> SizeKind:
        return size_kind_of(self.schedule)

    @property
    def element_type(self) -> Optional[type]:
        return element_type_of(self.schedule)

    def __repr__(self) -> str:
        return f"Interpolator({self.schedule!r}, rate={self.rate!r})"
