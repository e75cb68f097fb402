from __future__ import annotations

from enum import Enum

from hop_sim.errors import UnknownTopology


class TopologyKind(Enum):
    RING = "ring"
    DIRECTED_RING = "oneway_ring"
    STAR = "star"
    LINE = "line"

    @classmethod
    def names(cls) -> list[str]:
        return [k.value for k in cls]

    @classmethod
    def parse(cls, value: TopologyKind | str) -> TopologyKind:
        """
        Accepts a member, its CLI value ("oneway_ring") or its member
        name ("DIRECTED_RING"), case-insensitively.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for kind in cls:
                if key in (kind.value, kind.name.lower()):
                    return kind
        raise UnknownTopology(value, cls.names())
