from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class DistanceTable:
    """
    Per-node distances to every other node.

    distances has shape (n, n - 1). Row i holds the distance from node i to
    each other node once, in no particular column order; only the values
    matter to the sampler. The array is read-only and safe to share between
    worker threads.
    """

    n: int
    distances: np.ndarray

    def __len__(self) -> int:
        return self.n

    @property
    def row_width(self) -> int:
        return self.n - 1

    def row(self, i: int) -> np.ndarray:
        return self.distances[i]

    @property
    def min_distance(self) -> int:
        return int(self.distances.min())

    @property
    def max_distance(self) -> int:
        return int(self.distances.max())
