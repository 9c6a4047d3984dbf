from __future__ import annotations


class DAGError(Exception):
    """Base class for every failure raised while building or analysing a DAG."""


class InvalidInputError(DAGError):
    def __init__(self, message: str = "Invalid input provided.") -> None:
        super().__init__(message)


class CountMismatchError(InvalidInputError):
    """Raised when the declared transaction count disagrees with the records read."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected} nodes, but found {found} in the input file.")


class SizeLimitError(InvalidInputError):
    """Raised when the declared transaction count exceeds the builder ceiling."""

    def __init__(self, limit: int, count: int) -> None:
        self.limit = limit
        self.count = count
        super().__init__(f"The number of nodes must be less than {limit}.")


class NodeNotFoundError(DAGError):
    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"Node with id [{node_id}] not found in the DAG.")


class CycleError(DAGError):
    """Raised when adding ``source -> target`` would close a cycle."""

    def __init__(self, source: int, target: int) -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"Adding an edge from node [{source}] to node [{target}] would create a cycle."
        )


class InvalidTimestampError(DAGError):
    def __init__(self, message: str = "Timestamp is undefined.") -> None:
        super().__init__(message)


class ConfigError(Exception):
    """Raised when a configuration file cannot be parsed or fails validation."""
