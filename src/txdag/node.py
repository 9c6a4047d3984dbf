from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Vertex:
    """A single transaction in the graph.

    ``edges`` holds the ids of the vertices this one points at, in insertion
    order. The owning :class:`~txdag.graph.DirectedAcyclicGraph` keeps the
    canonical ``Vertex`` objects; edges are plain id references into it.
    """

    id: int
    timestamp: int | None = None
    edges: list[int] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.edges

    def has_edge(self, target_id: int) -> bool:
        return target_id in self.edges
