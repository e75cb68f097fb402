from __future__ import annotations

from typing import Optional

import numpy as np
from numba import njit

from hop_sim.model.distance_table import DistanceTable


@njit
def trial_mean(distances: np.ndarray) -> float:
    """
    One trial: every node sends to one uniformly chosen other node.
    Returns the mean hop count of that round.

    Draws come from numba's random state of the calling thread.
    """
    n = distances.shape[0]
    width = distances.shape[1]
    hops = 0
    for row in range(n):
        hops += distances[row, np.random.randint(0, width)]
    return hops / n


@njit
def trial_sum(distances: np.ndarray, count: int) -> float:
    acc = 0.0
    for _ in range(count):
        acc += trial_mean(distances)
    return acc


@njit
def seed_thread(seed: int) -> None:
    np.random.seed(seed)


def sample_step(table: DistanceTable) -> float:
    return float(trial_mean(table.distances))


def sample_trials(table: DistanceTable, count: int, seed: Optional[int] = None) -> float:
    """
    Sum of `count` independent sample_step() results, drawn on the
    calling thread.

    :param seed: reseeds the calling thread's random state first; None
        continues from its current state
    """
    if seed is not None:
        seed_thread(seed)
    return float(trial_sum(table.distances, count))
