from typing import Any, Callable, Dict, List, Optional

import torch

from schedule_api.optim.configs import SchedulerConfig
from schedule_api.optim.logger import ScheduleLogger
from schedule_api.schedulers.scheduler import ScheduleConfigError
from schedule_api.schedulers.stateful import Stateful


class OptimizerScheduler:
    """
    Drives one hyperparameter of a torch optimizer from a schedule.

    Each `step()` pulls the next value out of a `Stateful` cursor and writes it
    into `cfg.param_name` of the selected param groups. Call it once per
    iteration, before `optimizer.step()`.

    Example
    -------
    sched = OptimizerScheduler(opt, Sequence([warmup, Loop(decay, 1000)], [500, 1]))
    for batch in loader:
        lr = sched.step()
        loss.backward()
        opt.step()
    """

    def __init__(
        self,
        optimizer: torch.optim.Optimizer,
        schedule: Callable,
        cfg: Optional[SchedulerConfig] = None,
        advance: Optional[Callable[[int], bool]] = None,
        logger: Optional[ScheduleLogger] = None,
    ):
        if cfg is None:
            cfg = SchedulerConfig()

        self.optimizer = optimizer
        self.cfg       = cfg
        self.cursor    = Stateful(schedule, advance=advance)
        self.logger    = logger
        self.last_value: Optional[Any] = None
        # counts step() calls; the cursor may hold still under a gating predicate
        self.global_step = 0

        self._check_groups(cfg.param_groups)

    def _check_groups(self, indices: Optional[List[int]]) -> None:
        n_groups = len(self.optimizer.param_groups)
        for idx in indices or []:
            if not 0 <= idx < n_groups:
                raise ScheduleConfigError(
                    f"param group {idx} out of range, optimizer has {n_groups} groups"
                )

    def _selected_groups(self) -> List[Dict[str, Any]]:
        # resolved on every call so groups added with add_param_group are driven too
        groups = self.optimizer.param_groups
        if self.cfg.param_groups is None:
            return list(groups)
        return [groups[idx] for idx in self.cfg.param_groups]

    # -------------------------------------------------------------
    def step(self) -> Any:
        value = self.cursor.next()
        for group in self._selected_groups():
            group[self.cfg.param_name] = value

        self.global_step += 1
        self.last_value = value
        if self.logger is not None:
            self.logger.log_value(self.global_step, self.cfg.param_name, value)

        return value

    def reset(self) -> "OptimizerScheduler":
        self.cursor.reset()
        self.last_value = None
        self.global_step = 0
        return self

    # -------------------------------------------------------------
    def state_dict(self) -> Dict[str, Any]:
        return {
            "cursor": self.cursor.state_dict(),
            "last_value": self.last_value,
            "global_step": self.global_step,
        }

    def load_state_dict(self, state_dict: Dict[str, Any]) -> None:
        self.cursor.load_state_dict(state_dict["cursor"])
        self.last_value = state_dict["last_value"]
        self.global_step = int(state_dict.get("global_step", 0))

        # put the optimizer back where the checkpoint left it
        if self.last_value is not None:
            for group in self._selected_groups():
                group[self.cfg.param_name] = self.last_value

    def save(self, path: str) -> None:
        torch.save(self.state_dict(), path)
