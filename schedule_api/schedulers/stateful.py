import numbers
from typing import Any, Callable, Dict, Optional

from schedule_api.schedulers.scheduler import ScheduleConfigError, as_schedule


def _always(state: int) -> bool:
    return True


class Stateful:
    """
    Mutable cursor over a schedule, for use inside an imperative training loop.

    Every call to `next()` returns `schedule(state)` and then increments `state`
    if `advance(state)` is true. The predicate sees the state *before* the
    increment. The schedule itself is never mutated, so several cursors can
    share one schedule, each with its own counter.

    Example
    -------
    cursor = Stateful(Sequence([1e-3, decay], [100, 900]))
    for batch in loader:
        lr = cursor.next()          # or next(cursor)

    # hold the value still until something external says so
    cursor = Stateful(sched, advance=lambda state: epoch_done)
    """
    __slots__ = ("schedule", "state", "advance")

    def __init__(self, schedule: Callable, advance: Optional[Callable[[int], bool]] = None):
        self.schedule = as_schedule(schedule)
        self.state    = 1
        self.advance  = _always if advance is None else advance

    # -------------------------------------------------------------
    def next(self) -> Any:
        val = self.schedule(self.state)
        if self.advance(self.state):
            self.state += 1

        return val

    __next__ = next

    def __iter__(self):
        return self

    def reset(self) -> "Stateful":
        self.state = 1
        if hasattr(self.advance, "reset"):
            self.advance.reset()
        return self

    # -------------------------------------------------------------
    def state_dict(self) -> Dict[str, Any]:
        state_dict: Dict[str, Any] = {"state": self.state}
        if hasattr(self.advance, "state_dict"):
            state_dict["advance"] = self.advance.state_dict()
        return state_dict

    def load_state_dict(self, state_dict: Dict[str, Any]) -> None:
        self.state = int(state_dict["state"])
        if "advance" in state_dict and hasattr(self.advance, "load_state_dict"):
            self.advance.load_state_dict(state_dict["advance"])

    def __repr__(self) -> str:
        return f"Stateful({self.schedule!r}, state={self.state})"


class Every:
    """
    Advance predicate that is true on every `n`-th time it is consulted,
    e.g. `Stateful(sched, advance=every(batches_per_epoch))` moves a
    per-epoch schedule once per epoch while being polled every batch.

    The predicate counts its own calls, so give each cursor its own.
    `Stateful.reset()` and `Stateful.state_dict()` carry the count along.
    """
    __slots__ = ("n", "calls")

    def __init__(self, n: int):
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
            raise ScheduleConfigError(f"n must be an integer >= 1, got {n!r}")

        self.n     = int(n)
        self.calls = 0

    def __call__(self, state: int) -> bool:
        self.calls += 1
        return self.calls % self.n == 0

    def reset(self) -> None:
        self.calls = 0

    def state_dict(self) -> Dict[str, int]:
        return {"calls": self.calls}

    def load_state_dict(self, state_dict: Dict[str, int]) -> None:
        self.calls = int(state_dict["calls"])

    def __repr__(self) -> str:
        return f"every({self.n})"


def every(n: int) -> Every:
    return Every(n)
