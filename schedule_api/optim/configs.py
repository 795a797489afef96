from dataclasses import dataclass
from typing import Optional, List


@dataclass
class SchedulerConfig:
    param_name: str = "lr"                     # param-group key the schedule drives (lr, momentum, weight_decay...)
    param_groups: Optional[List[int]] = None   # indices of the groups to drive, None = all of them


@dataclass
class LoggingConfig:
    current_step:     int = 0                  # purge_step for a resumed TensorBoard run
    log_interval:     Optional[int] = None     # log every n-th step, None = every step
    tensorboard_path: Optional[str] = None
    tag:              str = "schedule"
    verbose:          bool = False
