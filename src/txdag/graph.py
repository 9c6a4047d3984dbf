from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from .errors import CycleError, InvalidTimestampError
from .node import Vertex

logger = logging.getLogger(__name__)


class EdgeResult(Enum):
    """Outcome of :meth:`DirectedAcyclicGraph.add_edge`.

    Only ``ADDED`` is truthy, so callers that just need a yes/no answer can
    keep writing ``if dag.add_edge(a, b):``. Hard failures are raised instead.
    """

    ADDED = "added"
    UNKNOWN_ENDPOINT = "unknown_endpoint"
    DUPLICATE = "duplicate"

    def __bool__(self) -> bool:
        return self is EdgeResult.ADDED


class DirectedAcyclicGraph:
    """Append-only DAG keyed by integer vertex id.

    Acyclicity is enforced when an edge is inserted: the edge is appended,
    reachability from the target back to the parent is tested, and the edge
    is rolled back with :class:`CycleError` if the parent is reachable.
    """

    def __init__(self) -> None:
        self.vertices: dict[int, Vertex] = {}

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self.vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices.values())

    def add_vertex(self, vertex_id: int, timestamp: int | None) -> Vertex:
        vertex = Vertex(id=vertex_id, timestamp=timestamp)
        self.vertices[vertex_id] = vertex
        return vertex

    def get(self, vertex_id: int) -> Vertex | None:
        return self.vertices.get(vertex_id)

    def add_edge(self, parent_id: int, target_id: int) -> EdgeResult:
        """Add ``parent_id -> target_id``.

        Returns ``EdgeResult.UNKNOWN_ENDPOINT`` or ``EdgeResult.DUPLICATE``
        without touching the graph when the edge cannot or need not be added.

        Raises:
            InvalidTimestampError: either endpoint has no timestamp.
            CycleError: the edge would close a cycle (self-loops included).
        """
        parent = self.vertices.get(parent_id)
        target = self.vertices.get(target_id)
        if parent is None or target is None:
            logger.debug("Skipping edge %s -> %s: unknown endpoint", parent_id, target_id)
            return EdgeResult.UNKNOWN_ENDPOINT
        if parent.has_edge(target_id):
            return EdgeResult.DUPLICATE

        if parent.timestamp is None or target.timestamp is None:
            raise InvalidTimestampError()

        if target.timestamp < parent.timestamp:
            logger.warning(
                "Node [%s] timestamp %s, is not greater than parent node [%s] timestamp %s.",
                target.id,
                target.timestamp,
                parent.id,
                parent.timestamp,
            )

        parent.edges.append(target_id)
        if self.has_path(target_id, parent_id):
            parent.edges.pop()
            raise CycleError(parent_id, target_id)

        logger.debug("Added edge %s -> %s", parent_id, target_id)
        return EdgeResult.ADDED

    def has_path(self, source_id: int, destination_id: int) -> bool:
        """Return True if ``destination_id`` is reachable from ``source_id``."""
        if source_id not in self.vertices or destination_id not in self.vertices:
            return False

        visited: set[int] = set()
        stack = [source_id]
        while stack:
            current = stack.pop()
            if current == destination_id:
                return True
            if current in visited:
                continue
            visited.add(current)
            for neighbor in self.vertices[current].edges:
                if neighbor not in visited:
                    stack.append(neighbor)
        return False

    def edges_of(self, vertex_id: int) -> list[int]:
        vertex = self.vertices.get(vertex_id)
        if vertex is None:
            return []
        return list(vertex.edges)

    def all_edges(self) -> list[tuple[int, int]]:
        return [(v.id, target) for v in self.vertices.values() for target in v.edges]

    def edge_count(self) -> int:
        return sum(len(v.edges) for v in self.vertices.values())
