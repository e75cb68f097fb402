from collections import Counter

import numpy as np
import pytest

from hop_sim.errors import InvalidNodeCount, UnknownTopology
from hop_sim.model.builders import build, directed_ring_profile, ring_profile, rotate
from hop_sim.model.topology import TopologyKind


def is_rotation(row, profile):
    m = len(profile)
    return any(list(rotate(np.asarray(profile), s)) == list(row) for s in range(m))


@pytest.mark.parametrize("kind", list(TopologyKind))
@pytest.mark.parametrize("n", [2, 3, 4, 5, 8, 11])
def test_table_shape_and_positive_entries(kind, n):
    table = build(kind, n)
    assert table.n == n
    assert table.distances.shape == (n, n - 1)
    assert table.distances.dtype == np.int64
    assert (table.distances >= 1).all()


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 9, 10])
def test_ring_rows_match_true_distances(n):
    table = build("ring", n)
    expected = sorted(min(d, n - d) for d in range(1, n))
    for i in range(n):
        assert sorted(table.row(i)) == expected


def test_rotate():
    profile = np.array([1, 2, 3, 4])
    assert list(rotate(profile, 0)) == [1, 2, 3, 4]
    assert list(rotate(profile, 1)) == [2, 3, 4, 1]
    assert list(rotate(profile, 5)) == [2, 3, 4, 1]
    assert list(rotate(profile, -1)) == [4, 1, 2, 3]


def test_ring_profile():
    assert list(ring_profile(4)) == [1, 2, 1]
    assert list(ring_profile(5)) == [1, 2, 2, 1]
    assert list(ring_profile(6)) == [1, 2, 3, 2, 1]
    assert list(ring_profile(2)) == [1]


def test_ring_n4_rows_are_rotations():
    table = build(TopologyKind.RING, 4)
    for i in range(4):
        assert is_rotation(table.row(i), [1, 2, 1])


def test_directed_ring_n4():
    assert list(directed_ring_profile(4)) == [1, 2, 3]
    table = build("oneway_ring", 4)
    for i in range(4):
        assert is_rotation(table.row(i), [1, 2, 3])
        assert table.row(i).sum() == 4 * 3 // 2


@pytest.mark.parametrize("n", [2, 3, 8, 11])
def test_directed_ring_rows_are_rotations(n):
    profile = list(range(1, n))
    table = build("oneway_ring", n)
    for i in range(n):
        assert is_rotation(table.row(i), profile)
        assert table.row(i).sum() == n * (n - 1) // 2


def test_star_n5():
    table = build("star", 5)
    assert list(table.row(0)) == [1, 1, 1, 1]
    for i in range(1, 5):
        counts = Counter(table.row(i).tolist())
        assert counts == {1: 1, 2: 3}
        assert table.row(i)[i - 1] == 1


@pytest.mark.parametrize("n", [2, 3, 8, 11])
def test_star_hub_and_leaf_rows(n):
    table = build("star", n)
    assert table.row(0).tolist() == [1] * (n - 1)
    for i in range(1, n):
        counts = Counter(table.row(i).tolist())
        assert counts[1] == 1
        assert counts[2] == n - 2
        assert sum(counts.values()) == n - 1


def test_star_n2():
    table = build("star", 2)
    assert table.distances.tolist() == [[1], [1]]


def test_line_n4():
    table = build("line", 4)
    assert sorted(table.row(0)) == [1, 2, 3]
    assert sorted(table.row(2)) == [1, 1, 2]
    assert list(table.row(2)) == [2, 1, 1]
    assert list(table.row(3)) == [3, 2, 1]


def test_line_matches_absolute_difference():
    n = 7
    table = build("line", n)
    for i in range(n):
        expected = sorted(abs(i - j) for j in range(n) if j != i)
        assert sorted(table.row(i)) == expected


def test_table_is_read_only():
    table = build("ring", 5)
    with pytest.raises(ValueError):
        table.distances[0, 0] = 7


@pytest.mark.parametrize("n", [1, 0, -3])
def test_invalid_node_count(n):
    with pytest.raises(InvalidNodeCount) as exc:
        build("ring", n)
    assert exc.value.count == n


def test_non_integer_node_count():
    with pytest.raises(InvalidNodeCount):
        build("line", 4.0)


def test_unknown_topology():
    with pytest.raises(UnknownTopology) as exc:
        build("mesh", 4)
    assert "mesh" in str(exc.value)
    assert "oneway_ring" in str(exc.value)


def test_unknown_topology_checked_before_node_count():
    with pytest.raises(UnknownTopology):
        build("torus", 0)
