from schedule_api.schedulers import (
    Schedule, SizeKind, Constant, Sequence, Loop, Interpolator,
    reverse, symmetric, Stateful, Every, every, as_schedule,
    ScheduleError, ScheduleConfigError, ScheduleDomainError
)

__version__ = "0.1.0"
