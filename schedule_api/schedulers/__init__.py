from schedule_api.schedulers.scheduler import (
    Schedule, SizeKind, Constant, as_schedule, size_kind_of, element_type_of,
    ScheduleError, ScheduleConfigError, ScheduleDomainError
)
from schedule_api.schedulers.sequence import Sequence
from schedule_api.schedulers.loop import Loop, Interpolator
from schedule_api.schedulers.transforms import reverse, symmetric
from schedule_api.schedulers.stateful import Stateful, Every, every
