from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass
class SimulationResult:
    backend: str
    config: Dict[str, Any]

    # total time
    wall_time_seconds: float

    topology: str
    nodes: int
    trials: int
    # [hops], mean over all trials
    avg_hop_count: float

    # anything backend specific (thread count, ranks, chunking)
    extra_stats: Dict[str, Any] = field(default_factory=dict)

    def summary_line(self) -> str:
        return (
            f"Average hop count after {self.trials} simulation steps: "
            f"{self.avg_hop_count:.3f} hops"
        )
