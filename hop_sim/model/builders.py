from __future__ import annotations

from typing import Callable, Dict

import numpy as np

from hop_sim.errors import InvalidNodeCount
from hop_sim.model.distance_table import DistanceTable
from hop_sim.model.topology import TopologyKind


def rotate(profile: np.ndarray, shift: int) -> np.ndarray:
    """
    Cyclic left rotation: row[k] = profile[(k + shift) % len(profile)].
    """
    m = profile.shape[0]
    shift = int(shift) % m
    row = np.empty_like(profile)
    row[: m - shift] = profile[shift:]
    row[m - shift:] = profile[:shift]
    return row


def ring_profile(n: int) -> np.ndarray:
    """
    Distances min(d, n - d) for offsets d = 1..n-1, built from its
    symmetry: 1..h, the midpoint n/2 when n is even, then h..1.
    """
    half = (n - 1) // 2
    profile = np.empty(n - 1, dtype=np.int64)
    profile[:half] = np.arange(1, half + 1)
    if n % 2 == 0:
        profile[half] = n // 2
    profile[n - 1 - half:] = np.arange(half, 0, -1)
    return profile


def directed_ring_profile(n: int) -> np.ndarray:
    return np.arange(1, n, dtype=np.int64)


def _rotated_rows(profile: np.ndarray, n: int) -> np.ndarray:
    rows = np.empty((n, n - 1), dtype=np.int64)
    for i in range(n):
        rows[i] = rotate(profile, i)
    return rows


def _build_ring(n: int) -> np.ndarray:
    return _rotated_rows(ring_profile(n), n)


def _build_directed_ring(n: int) -> np.ndarray:
    return _rotated_rows(directed_ring_profile(n), n)


def _build_star(n: int) -> np.ndarray:
    # node 0 is the hub; a leaf is 1 hop from the hub and 2 from other leaves
    rows = np.empty((n, n - 1), dtype=np.int64)
    rows[0] = 1

    leaf_pattern = np.full(n - 1, 2, dtype=np.int64)
    leaf_pattern[0] = 1
    for i in range(1, n):
        # puts the hop to the hub in column i - 1
        rows[i] = rotate(leaf_pattern, -(i - 1))
    return rows


def _build_line(n: int) -> np.ndarray:
    rows = np.empty((n, n - 1), dtype=np.int64)
    for i in range(n):
        # left neighbours, nearest last
        rows[i, :i] = np.arange(i, 0, -1)
        # right neighbours, nearest first
        rows[i, i:] = np.arange(1, n - i)
    return rows


BUILDERS: Dict[TopologyKind, Callable[[int], np.ndarray]] = {
    TopologyKind.RING: _build_ring,
    TopologyKind.DIRECTED_RING: _build_directed_ring,
    TopologyKind.STAR: _build_star,
    TopologyKind.LINE: _build_line,
}


def _check_node_count(n) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 1:
        raise InvalidNodeCount(n)
    return int(n)


def build(kind: TopologyKind | str, n: int) -> DistanceTable:
    """
    Build the distance table of the given topology with n nodes.

    :raises UnknownTopology: kind is not one of the supported topologies
    :raises InvalidNodeCount: n is not an integer greater than 1
    """
    topology = TopologyKind.parse(kind)
    n = _check_node_count(n)

    distances = BUILDERS[topology](n)
    distances.setflags(write=False)
    return DistanceTable(n=n, distances=distances)
