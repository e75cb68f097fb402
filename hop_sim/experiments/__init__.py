from hop_sim.config import SimulationConfig
from hop_sim.backends import get_backend, BACKENDS


__all__ = ["SimulationConfig", "get_backend", "BACKENDS"]
