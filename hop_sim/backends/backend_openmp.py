from hop_sim.backends.base_backend import SimulationBackend
from hop_sim.config import SimulationConfig
from hop_sim.metrics.types import SimulationResult
from hop_sim.metrics.timers import Timer
from hop_sim.model.estimator import CHUNKS_PER_WORKER, estimate, resolve_workers


class OpenMPBackend(SimulationBackend):
    """
    OpenMP-like backend using Numba's parallel CPU execution.
    Trials are split into chunks and each chunk is summed on one thread
    by a Numba @njit(parallel=True) kernel.

    The thread count only applies for the duration of run(); numba's
    process-wide setting is left as it was.
    """

    name = "openmp"

    def run(self) -> SimulationResult:
        cfg: SimulationConfig = self.config
        workers = cfg.num_threads or None

        # Warm-up call to trigger Numba JIT compilation (not measured)
        estimate(self.table, trial_count=1, num_workers=workers, seed=cfg.random_seed)

        with Timer() as t:
            avg = estimate(
                self.table,
                trial_count=cfg.trials,
                num_workers=workers,
                seed=cfg.random_seed,
            )

        threads = resolve_workers(workers)
        debug_stats = {
            "num_threads": threads,
            "num_chunks": min(cfg.trials, threads * CHUNKS_PER_WORKER),
        }

        return self._result(avg, t.elapsed, debug_stats)
