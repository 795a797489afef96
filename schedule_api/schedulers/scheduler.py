import numbers
from enum import Enum
from typing import Any, Callable, Iterator, Optional, Tuple


class ScheduleError(ValueError):
    """Base class for every error raised by the schedule combinators."""


class ScheduleConfigError(ScheduleError):
    """A schedule was constructed with invalid arguments."""


class ScheduleDomainError(ScheduleError):
    """A step-indexed schedule was evaluated at a non-positive step."""


class SizeKind(Enum):
    INFINITE = "infinite"
    SIZE_UNKNOWN = "size_unknown"


def check_step(t, owner: str) -> None:
    # steps count from 1; fractions in (0, 1) come from an Interpolator
    # and are served by the first window
    if t <= 0:
        raise ScheduleDomainError(f"{owner} is defined for t > 0, got t={t}")


def mod1(t, period):
    """1-based modulo: maps t onto (0, period], so mod1(period, period) == period."""
    r = t % period
    return period if r == 0 else r


class Schedule:
    """
    Base class of every schedule: a pure mapping from a 1-based step to a value.

    Subclasses implement `__call__`. Iteration is driven by `iterate`, which
    threads its state through the return value instead of storing it on the
    schedule, so a single schedule can be traversed many times concurrently.

    Example
    -------
    sched = Constant(0.1)

    # stateless: query any step you like
    lr_at_500 = sched(500)

    # external iteration: value plus the state of the next call
    lr, state = sched.iterate()
    lr, state = sched.iterate(state)

    # lazy python iteration: S(1), S(2), ...
    for lr in sched:
        ...
    """

    def __call__(self, t):
        raise NotImplementedError

    # -------------------------------------------------------------
    def iterate(self, state: Optional[Any] = None) -> Tuple[Any, Any]:
        """
        Parameters
        ----------
        state : Any | None
            • None – start from the first step.
            • otherwise – the state returned by the previous call.

        Returns
        -------
        (value, next_state)
        """
        t = 1 if state is None else state
        return self(t), t + 1

    def __iter__(self) -> Iterator[Any]:
        state = None
        while True:
            value, state = self.iterate(state)
            yield value

    # -------------------------------------------------------------
    @property
    def size_kind(self) -> SizeKind:
        return SizeKind.SIZE_UNKNOWN

    @property
    def element_type(self) -> Optional[type]:
        return None

    @property
    def has_element_type(self) -> bool:
        return self.element_type is not None


def size_kind_of(f: Callable) -> SizeKind:
    if isinstance(f, Schedule):
        return f.size_kind
    return SizeKind.SIZE_UNKNOWN


def element_type_of(f: Callable) -> Optional[type]:
    if isinstance(f, Schedule):
        return f.element_type
    return None


class Constant(Schedule):
    """A schedule that is always `value`, whatever step it is asked for."""
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __call__(self, t):
        return self.value

    @property
    def size_kind(self) -> SizeKind:
        return SizeKind.INFINITE

    @property
    def element_type(self) -> Optional[type]:
        return type(self.value)

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


def as_schedule(obj) -> Callable:
    """
    Lift a bare number into a `Constant`; schedules and plain callables
    are returned unchanged.
    """
    if isinstance(obj, numbers.Number):
        return Constant(obj)
    if callable(obj):
        return obj
    raise ScheduleConfigError(
        f"expected a schedule, a callable or a number, got {type(obj).__name__}"
    )
