from __future__ import annotations

import logging
import sys
from dataclasses import asdict

from mpi4py import MPI

from hop_sim.cli import build_parser, config_from_args, EXIT_USAGE
from hop_sim.io.logging_utils import setup_logging, logger
from hop_sim.backends.backend_mpi import MPIBackend


def main() -> int:
    # Usage: mpiexec -n 4 python run_mpi.py TOPOLOGY COUNT [--trials N] [--seed S]
    args = build_parser(prog="run_mpi.py", local_backends=False).parse_args()

    # Initialize logging (each rank gets the same config; we will log only on rank 0)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    comm = MPI.COMM_WORLD
    rank = comm.Get_rank()

    try:
        cfg = config_from_args(args)
    except ValueError as e:
        if rank == 0:
            print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    cfg.num_processes = comm.Get_size()

    # Create MPI backend directly, do NOT use run_single / get_backend
    backend = MPIBackend(cfg)
    result = backend.run()

    # Only rank 0 prints results
    if rank == 0:
        logger.info("=== MPI run finished ===")
        logger.info(f"Config: {asdict(cfg)}")
        logger.info(f"Wall time: {result.wall_time_seconds:.4f} s")
        print(result.summary_line())
    return 0


if __name__ == "__main__":
    sys.exit(main())
