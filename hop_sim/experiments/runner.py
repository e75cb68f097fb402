from typing import Iterable, List

from hop_sim.backends import get_backend
from hop_sim.config import SimulationConfig
from hop_sim.metrics.types import SimulationResult


def run_single(config: SimulationConfig) -> SimulationResult:
    BackendCls = get_backend(config.backend)
    backend = BackendCls(config)
    return backend.run()


def run_scaling_experiment(
    base_config: SimulationConfig,
    backend_name: str,
    param_name: str,
    values: Iterable[int | float]
) -> List[SimulationResult]:
    """
    Helper: changes one parameter (e.g num_threads or nodes) and runs backend

    :param base_config: config every run starts from
    :param backend_name: registered backend to run with
    :param param_name: SimulationConfig field to vary
    :param values: values assigned to param_name, one run each
    :return: one result per value, in order
    """

    results: List[SimulationResult] = []
    for v in values:
        cfg_dict = base_config.to_dict()
        cfg_dict["backend"] = backend_name
        cfg_dict[param_name] = v
        cfg = SimulationConfig(**cfg_dict)  # type: ignore[arg-type]
        res = run_single(cfg)
        results.append(res)
    return results
