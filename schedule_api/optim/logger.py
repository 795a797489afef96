import os
from typing import Optional
from torch.utils.tensorboard import SummaryWriter
from schedule_api.optim.configs import LoggingConfig


class ScheduleLogger:
    def __init__(self, cfg: LoggingConfig):
        self.cfg = cfg

        # TensorBoard writer
        self.writer: Optional[SummaryWriter] = None
        if cfg.tensorboard_path:
            os.makedirs(cfg.tensorboard_path, exist_ok=True)
            self.writer = SummaryWriter(log_dir=cfg.tensorboard_path, purge_step=cfg.current_step)


    def should_log(self, step: int) -> bool:
        interval = self.cfg.log_interval
        return not interval or step % interval == 0


    def log_value(self, step: int, param_name: str, value: float):
        """
        Console and TensorBoard logging of one scheduled value.
        Values of steps outside `log_interval` are dropped.
        """
        lc = self.cfg
        if not self.should_log(step):
            return

        # --- Console ---
        if lc.verbose:
            print(f"[Sched {lc.tag} | step {step}] {param_name}: {value:.4g}")

        # --- TensorBoard ---
        if self.writer:
            self.writer.add_scalar(f"{lc.tag}/{param_name}", value, step)


    def close(self):
        if self.writer:
            self.writer.flush()
            self.writer.close()
            self.writer = None
