from typing import Callable, Optional

import torch
from torch.optim.lr_scheduler import LambdaLR

from schedule_api.optim.configs import SchedulerConfig, LoggingConfig
from schedule_api.optim.logger import ScheduleLogger
from schedule_api.optim.scheduler import OptimizerScheduler
from schedule_api.schedulers.scheduler import as_schedule


def build_optimizer_scheduler(
    optimizer: torch.optim.Optimizer,
    schedule: Callable,
    sched_cfg: SchedulerConfig | None = None,
    logging_cfg: LoggingConfig | None = None,
    advance: Optional[Callable[[int], bool]] = None,
) -> OptimizerScheduler:

    if sched_cfg is None:
        sched_cfg = SchedulerConfig()

    if logging_cfg is None:
        logging_cfg = LoggingConfig()

    scheduler = OptimizerScheduler(
        optimizer=optimizer,
        schedule=schedule,
        cfg=sched_cfg,
        advance=advance,
        logger=ScheduleLogger(logging_cfg),
    )
    return scheduler


def build_lambda_lr(
    optimizer: torch.optim.Optimizer,
    schedule: Callable,
    last_epoch: int = -1,
) -> LambdaLR:
    """
    Wrap `schedule` as a LambdaLR multiplier of the base learning rates.
    LambdaLR counts epochs from 0, schedules count steps from 1.
    """
    schedule = as_schedule(schedule)

    def lr_lambda(epoch: int) -> float:
        return schedule(epoch + 1)

    return LambdaLR(optimizer, lr_lambda=lr_lambda, last_epoch=last_epoch)


def load_scheduler_from_checkpoint(scheduler: OptimizerScheduler, path: str) -> OptimizerScheduler:
    checkpoint = torch.load(path, weights_only=False)
    scheduler.load_state_dict(checkpoint)
    return scheduler
