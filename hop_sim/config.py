from dataclasses import dataclass, asdict
from typing import Literal, Optional

from hop_sim.model.estimator import DEFAULT_TRIALS


BackendName = Literal["sequential", "openmp", "mpi"]


@dataclass
class SimulationConfig:
    # one of TopologyKind's values, case-insensitive
    topology: str = "ring"
    # number of nodes in the topology
    nodes: int = 4
    # independent trials averaged into the estimate
    trials: int = DEFAULT_TRIALS
    # None -> fresh entropy on every run
    random_seed: Optional[int] = None

    backend: BackendName = "openmp"

    # openMP, 0 keeps numba's default
    num_threads: int = 0
    # mpi
    num_processes: int = 1

    # scenario desc
    label: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
