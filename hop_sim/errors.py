class ConstructionError(ValueError):
    """Base class for failures while building a distance table."""


class InvalidNodeCount(ConstructionError):
    def __init__(self, count) -> None:
        self.count = count
        super().__init__(f"Node count must be an integer greater than 1, got {count!r}")


class UnknownTopology(ConstructionError):
    def __init__(self, name, available) -> None:
        self.name = name
        super().__init__(
            f"Unknown topology '{name}'. Available: {', '.join(available)}"
        )
