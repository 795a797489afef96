from schedule_api.optim.configs import SchedulerConfig, LoggingConfig
from schedule_api.optim.logger import ScheduleLogger
from schedule_api.optim.scheduler import OptimizerScheduler
from schedule_api.optim.factories import (
    build_optimizer_scheduler, build_lambda_lr, load_scheduler_from_checkpoint
)
