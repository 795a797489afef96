from typing import List, Optional

import numpy as np
import torch
import torch.nn as nn
from torch.optim import SGD

from schedule_api.schedulers import Sequence, Loop, symmetric
from schedule_api.optim import SchedulerConfig, LoggingConfig, build_optimizer_scheduler


BASE_LR      = 0.05
WARMUP_STEPS = 10
CYCLE_STEPS  = 20


def warmup(t):
    return BASE_LR * t / WARMUP_STEPS


def decay(t):
    return BASE_LR * 0.9 ** (t - 1)


def triangle(t):
    # rising half of a 0.85 -> 0.95 -> 0.85 cycle
    return 0.85 + 0.1 * t / (CYCLE_STEPS / 2)


def build_lr_schedule() -> Sequence:
    """Linear warmup, then a decay restarted every CYCLE_STEPS steps."""
    return Sequence((warmup, WARMUP_STEPS), (Loop(decay, CYCLE_STEPS), 1))


def build_momentum_schedule() -> Sequence:
    return Sequence((0.9, WARMUP_STEPS), (Loop(symmetric(triangle, CYCLE_STEPS), CYCLE_STEPS), 1))


def main(n_steps: int = 60, tensorboard_path: Optional[str] = None, seed: int = 0) -> List[float]:
    """
    Fit y = 2x + 1 with SGD while the learning rate and the momentum
    follow their schedules. Returns the learning rate used at every step.
    """
    torch.manual_seed(seed)
    rng = np.random.default_rng(seed)

    x = torch.as_tensor(rng.uniform(-1.0, 1.0, size=(256, 1)), dtype=torch.float32)
    y = 2.0 * x + 1.0

    model = nn.Linear(1, 1)
    opt = SGD(model.parameters(), lr=BASE_LR, momentum=0.9)

    lr_sched = build_optimizer_scheduler(
        opt, build_lr_schedule(),
        logging_cfg=LoggingConfig(tensorboard_path=tensorboard_path, tag="toy", log_interval=10),
    )
    momentum_sched = build_optimizer_scheduler(
        opt, build_momentum_schedule(),
        sched_cfg=SchedulerConfig(param_name="momentum"),
    )

    lrs = []
    try:
        for _ in range(n_steps):
            lrs.append(lr_sched.step())
            momentum_sched.step()

            loss = nn.functional.mse_loss(model(x), y)
            opt.zero_grad()
            loss.backward()
            opt.step()
    finally:
        lr_sched.logger.close()
        momentum_sched.logger.close()
    return lrs


if __name__ == "__main__":
    lrs = main()
    print(f"first lrs: {lrs[:3]}  last lr: {lrs[-1]:.4g}")
