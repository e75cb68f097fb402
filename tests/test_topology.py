import pytest

from hop_sim.errors import ConstructionError, UnknownTopology
from hop_sim.model.topology import TopologyKind


def test_parse_cli_values_case_insensitive():
    assert TopologyKind.parse("ring") is TopologyKind.RING
    assert TopologyKind.parse("RING") is TopologyKind.RING
    assert TopologyKind.parse("OneWay_Ring") is TopologyKind.DIRECTED_RING
    assert TopologyKind.parse("Star") is TopologyKind.STAR
    assert TopologyKind.parse("line") is TopologyKind.LINE


def test_parse_member_name_and_member():
    assert TopologyKind.parse("directed_ring") is TopologyKind.DIRECTED_RING
    assert TopologyKind.parse(TopologyKind.STAR) is TopologyKind.STAR


@pytest.mark.parametrize("value", ["", "mesh", "rings", None, 3])
def test_parse_rejects_unknown(value):
    with pytest.raises(UnknownTopology):
        TopologyKind.parse(value)


def test_unknown_topology_is_value_error():
    assert issubclass(UnknownTopology, ConstructionError)
    assert issubclass(UnknownTopology, ValueError)
