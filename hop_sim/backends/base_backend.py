from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Any, Dict, Optional

from hop_sim.config import SimulationConfig
from hop_sim.io.logging_utils import logger
from hop_sim.metrics.types import SimulationResult
from hop_sim.model.builders import build


class SimulationBackend(ABC):
    """
    Abstract base for all backends (Sequential, OpenMP, MPI).

    The distance table is built once here, so an unknown topology or an
    invalid node count fails before any trial runs.
    """

    name: str = "base"

    def __init__(self, config: SimulationConfig):
        self.config = config
        self.table = build(config.topology, config.nodes)
        logger.debug(
            f"Built {config.topology} table: {self.table.n} rows x "
            f"{self.table.row_width} columns"
        )

    @abstractmethod
    def run(self) -> SimulationResult:
        """
        Runs simulation and returns results.
        """
        raise NotImplementedError

    def _result(
        self,
        avg_hop_count: float,
        wall_time: float,
        extra_stats: Optional[Dict[str, Any]] = None,
    ) -> SimulationResult:
        cfg = self.config
        return SimulationResult(
            backend=self.name,
            config=asdict(cfg),
            wall_time_seconds=wall_time,
            topology=cfg.topology,
            nodes=cfg.nodes,
            trials=cfg.trials,
            avg_hop_count=avg_hop_count,
            extra_stats=extra_stats or {},
        )
