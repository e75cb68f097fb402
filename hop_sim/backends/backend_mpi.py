import numpy as np
from mpi4py import MPI

from hop_sim.backends.base_backend import SimulationBackend
from hop_sim.config import SimulationConfig
from hop_sim.metrics.types import SimulationResult
from hop_sim.metrics.timers import Timer
from hop_sim.model.estimator import chunk_seeds, split_trials
from hop_sim.model.sampler import sample_trials


class MPIBackend(SimulationBackend):
    """
    MPI backend using domain decomposition of the trial range.

    Every rank builds the same distance table, samples its own slice of
    the trials with its own seed derived from the shared one, and the
    partial sums are reduced (summed) to rank 0. The estimate is computed
    on rank 0 and broadcast back to all ranks.
    """

    name = "mpi"

    def __init__(self, config: SimulationConfig):
        super().__init__(config)

        self.comm = MPI.COMM_WORLD
        self.rank = self.comm.Get_rank()
        self.size = self.comm.Get_size()

        # If there are more ranks than trials, some ranks get no trials
        sizes = np.zeros(self.size, dtype=np.int64)
        parts = split_trials(self.config.trials, self.size)
        sizes[: parts.shape[0]] = parts
        self.local_trials = int(sizes[self.rank])

        # different stream per rank
        self.seed = int(chunk_seeds(self.size, self.config.random_seed)[self.rank])

    def run(self) -> SimulationResult:
        cfg: SimulationConfig = self.config
        if cfg.trials <= 0:
            raise ValueError(f"trials must be positive, got {cfg.trials}")

        with Timer() as t:
            local_sum = sample_trials(self.table, self.local_trials, seed=self.seed)

        comm = self.comm
        global_sum = comm.reduce(local_sum, op=MPI.SUM, root=0)
        global_wall = comm.reduce(t.elapsed, op=MPI.MAX, root=0)  # max wall time across ranks

        if self.rank == 0:
            avg = global_sum / cfg.trials
        else:
            avg = 0.0

        avg, wall_time = comm.bcast((avg, global_wall), root=0)

        debug_stats = {
            "num_ranks": self.size,
            "rank": self.rank,
            "local_trials": self.local_trials,
        }

        return self._result(avg, wall_time, debug_stats)
