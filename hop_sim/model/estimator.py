from __future__ import annotations

from typing import Optional

import numpy as np
from numba import config as numba_config
from numba import get_num_threads, njit, prange, set_num_threads

from hop_sim.io.logging_utils import logger
from hop_sim.model.distance_table import DistanceTable
from hop_sim.model.sampler import trial_sum


DEFAULT_TRIALS = 1_000_000
# more chunks than threads keeps the pool busy when chunks finish unevenly
CHUNKS_PER_WORKER = 4


@njit(parallel=True)
def trial_chunk_sums(
    distances: np.ndarray,
    chunk_sizes: np.ndarray,
    seeds: np.ndarray,
) -> np.ndarray:
    """
    Numba-parallel kernel: each chunk runs its trials on one thread and
    writes the sum of its trial means into its own slot.

    Numba keeps one random state per thread; seeding it at the start of a
    chunk makes the chunk's draws independent of every other chunk.
    """
    num_chunks = chunk_sizes.shape[0]
    sums = np.zeros(num_chunks, dtype=np.float64)

    for c in prange(num_chunks):
        np.random.seed(seeds[c])
        sums[c] = trial_sum(distances, chunk_sizes[c])

    return sums


def split_trials(trial_count: int, num_chunks: int) -> np.ndarray:
    """
    Partition trial_count into at most num_chunks non-empty chunk sizes
    that differ by at most one.
    """
    num_chunks = max(1, min(num_chunks, trial_count))
    base, rem = divmod(trial_count, num_chunks)
    sizes = np.full(num_chunks, base, dtype=np.int64)
    sizes[:rem] += 1
    return sizes


def chunk_seeds(num_chunks: int, seed: Optional[int] = None) -> np.ndarray:
    # numba's np.random.seed takes a 32-bit value
    words = np.random.SeedSequence(seed).generate_state(num_chunks, dtype=np.uint32)
    return words.astype(np.int64)


def resolve_workers(num_workers: Optional[int] = None) -> int:
    """
    Threads a call with num_workers would use: None or 0 means numba's
    current setting, larger requests are capped at numba's pool size.
    """
    if num_workers is None or num_workers <= 0:
        return get_num_threads()
    return min(num_workers, numba_config.NUMBA_NUM_THREADS)


def estimate(
    table: DistanceTable,
    trial_count: int = DEFAULT_TRIALS,
    num_workers: Optional[int] = None,
    seed: Optional[int] = None,
) -> float:
    """
    Mean hop count over trial_count independent trials, run on numba's
    thread pool.

    :param num_workers: threads to use for this call; None keeps numba's
        current setting, which is restored afterwards either way
    :param seed: root seed for the per-chunk seeds; None draws fresh entropy
    """
    if trial_count <= 0:
        raise ValueError(f"trial_count must be positive, got {trial_count}")

    previous = get_num_threads()
    workers = resolve_workers(num_workers)
    set_num_threads(workers)

    try:
        sizes = split_trials(trial_count, workers * CHUNKS_PER_WORKER)
        seeds = chunk_seeds(sizes.shape[0], seed)
        logger.debug(
            f"Estimating over {trial_count} trials: {workers} threads, "
            f"{sizes.shape[0]} chunks"
        )
        partial = trial_chunk_sums(table.distances, sizes, seeds)
    finally:
        set_num_threads(previous)

    return float(partial.sum()) / trial_count
