from hop_sim.backends.base_backend import SimulationBackend
from hop_sim.config import SimulationConfig
from hop_sim.metrics.types import SimulationResult
from hop_sim.metrics.timers import Timer
from hop_sim.model.sampler import sample_trials


class SequentialBackend(SimulationBackend):
    """
    Sequential implementation of the simulation.
    Used as a reference for speedup measurements.
    """

    name = "sequential"

    def run(self) -> SimulationResult:
        cfg: SimulationConfig = self.config
        if cfg.trials <= 0:
            raise ValueError(f"trials must be positive, got {cfg.trials}")

        # Warm-up call to trigger Numba JIT compilation (not measured)
        sample_trials(self.table, 1)

        with Timer() as t:
            total = sample_trials(self.table, cfg.trials, seed=cfg.random_seed)

        return self._result(total / cfg.trials, t.elapsed)
