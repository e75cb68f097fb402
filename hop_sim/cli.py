from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from hop_sim.backends import BACKENDS
from hop_sim.config import SimulationConfig
from hop_sim.errors import InvalidNodeCount
from hop_sim.experiments.runner import run_single
from hop_sim.io.logging_utils import setup_logging, logger
from hop_sim.model.estimator import DEFAULT_TRIALS
from hop_sim.model.topology import TopologyKind


EXIT_USAGE = 2


def build_parser(prog: str = "hop-sim", local_backends: bool = True) -> argparse.ArgumentParser:
    """
    :param local_backends: offer --backend and --threads; the MPI entry
        point turns them off since it always runs the mpi backend
    """
    ap = argparse.ArgumentParser(
        prog=prog,
        description="Estimate the average message hop count of a network topology.",
    )
    ap.add_argument("topology", metavar="TOPOLOGY",
                    help=f"one of: {', '.join(TopologyKind.names())} (case-insensitive)")
    ap.add_argument("count", metavar="COUNT", type=int, help="number of nodes, > 1")
    ap.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    if local_backends:
        ap.add_argument("--backend", choices=sorted(BACKENDS), default="openmp")
        ap.add_argument("--threads", type=int, default=0,
                        help="worker threads for the openmp backend (0 = all)")
    else:
        ap.set_defaults(backend="mpi", threads=0)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """
    Validate the raw arguments and turn them into a config.

    :raises UnknownTopology: topology is not supported
    :raises InvalidNodeCount: node count <= 1
    :raises ValueError: trial count <= 0 or thread count < 0
    """
    topology = TopologyKind.parse(args.topology)
    if args.count <= 1:
        raise InvalidNodeCount(args.count)
    if args.trials <= 0:
        raise ValueError(f"--trials must be positive, got {args.trials}")
    if args.threads < 0:
        raise ValueError(f"--threads must be 0 (all) or positive, got {args.threads}")

    return SimulationConfig(
        topology=topology.value,
        nodes=args.count,
        trials=args.trials,
        random_seed=args.seed,
        backend=args.backend,
        num_threads=args.threads,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        cfg = config_from_args(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    logger.info(f"Running simulation with backend='{cfg.backend}'")
    result = run_single(cfg)
    logger.info(f"Wall time: {result.wall_time_seconds:.4f} s")

    print(result.summary_line())
    return 0


if __name__ == "__main__":
    sys.exit(main())
