"""
Simulated workload task.

Stands in for real app work (a sync, an upload) so the whole pipeline can be
driven end to end without touching anything outside the process.

Params:
    duration          total seconds of simulated work (default 1.0)
    steps             how many equal slices the work is split into (default 1)
    fail_at_step      raise when this 0-based step is reached
    fail_probability  chance, 0.0-1.0, of failing before any work is done

The result reports the steps run and the wall-clock time they took.
"""

import random
import time

from jobs.base import AbstractTaskHandler


class SleepTask(AbstractTaskHandler):

    def run(self, params: dict) -> dict:
        duration = float(params.get("duration", 1.0))
        steps = int(params.get("steps", 1))
        fail_at_step = params.get("fail_at_step")

        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        if steps < 1:
            raise ValueError(f"steps must be >= 1, got {steps}")

        if random.random() < params.get("fail_probability", 0.0):
            raise RuntimeError("Simulated failure before start")

        started = time.monotonic()
        for step in range(steps):
            if step == fail_at_step:
                raise RuntimeError(f"Simulated failure at step {step} of {steps}")
            time.sleep(duration / steps)

        return {
            "steps": steps,
            "duration": duration,
            "elapsed_sec": round(time.monotonic() - started, 3),
        }

    @property
    def task_type(self) -> str:
        return "sleep"
