"""
Graph Analysis Service.

Read-only statistics over a finished :class:`DirectedAcyclicGraph`, anchored
at a fixed root vertex (the origin transaction, id 0, in built graphs).
"""

from __future__ import annotations

from collections import deque
from enum import Enum

from .errors import NodeNotFoundError
from .graph import DirectedAcyclicGraph


class Color(Enum):
    BLACK = 0
    WHITE = 1

    def toggle(self) -> Color:
        return Color.WHITE if self is Color.BLACK else Color.BLACK


class GraphAnalysisService:
    """Compute depth, fan-in, ordering and component statistics for a DAG.

    Every query is a pure function of the bound graph and root; nothing is
    cached between calls.

    Example usage:
        dag = DAGBuilder(max_nodes=1000).build_from_file("database.txt")
        service = GraphAnalysisService(dag, root_id=0)

        service.topological_sort()  # [0, 1, 3, 2, 5, 4]
        service.get_avg_depth()     # 1.333...
    """

    def __init__(self, graph: DirectedAcyclicGraph, root_id: int = 0) -> None:
        """
        Bind the service to a graph and a root.

        Raises:
            NodeNotFoundError: If ``root_id`` is not a vertex of ``graph``
        """
        if root_id not in graph.vertices:
            raise NodeNotFoundError(root_id)
        self.graph = graph
        self.root_id = root_id

    def is_bipartite(self) -> bool:
        """
        Two-colour the vertices reachable from the root with a BFS.

        The root is White and every newly reached child takes the opposite
        colour of the vertex that discovered it. A child that is already
        coloured with the wrong colour makes the graph non-bipartite.
        Vertices the root cannot reach are ignored.
        """
        colors: dict[int, Color] = {self.root_id: Color.WHITE}
        queue: deque[int] = deque([self.root_id])

        while queue:
            current = queue.popleft()
            next_color = colors[current].toggle()
            for child in self.graph.vertices[current].edges:
                child_color = colors.get(child)
                if child_color is None:
                    colors[child] = next_color
                    queue.append(child)
                elif child_color is not next_color:
                    return False
        return True

    def get_depths(self) -> dict[int, int]:
        """
        Assign a depth to every vertex reachable from the root.

        Stack-based DFS: the root has depth 0 and a child gets its
        discoverer's depth + 1 the first time it is seen. The depth is fixed
        at first discovery, so it depends on edge order and is not
        necessarily the shortest distance.

        Returns:
            Mapping of vertex id to depth
        """
        depths: dict[int, int] = {self.root_id: 0}
        stack: list[tuple[int, int]] = [(self.root_id, 0)]

        while stack:
            current, depth = stack.pop()
            for child in self.graph.vertices[current].edges:
                if child not in depths:
                    depths[child] = depth + 1
                    stack.append((child, depth + 1))
        return depths

    def get_max_depth(self) -> int:
        return max(self.get_depths().values())

    def get_avg_depth(self) -> float:
        """
        Sum of reachable depths divided by the number of vertices in the whole
        graph. Unreachable vertices only enlarge the denominator.
        """
        return sum(self.get_depths().values()) / len(self.graph)

    def get_avg_transaction_per_depth(self) -> float:
        """Non-origin vertices per depth level: ``(|V| - 1) / max_depth``."""
        if len(self.graph) == 1:
            return 0.0
        max_depth = self.get_max_depth()
        if max_depth == 0:
            # root has no outgoing edges
            return 0.0
        return (len(self.graph) - 1) / max_depth

    def get_avg_in_reference_per_node(self) -> float:
        """Mean in-degree over every vertex of the graph, reachable or not."""
        in_refs = {vertex_id: 0 for vertex_id in self.graph.vertices}
        for vertex in self.graph:
            for child in vertex.edges:
                in_refs[child] += 1
        return sum(in_refs.values()) / len(self.graph)

    def topological_sort(self) -> list[int]:
        """
        Reverse post-order DFS over every vertex, in vertex insertion order.

        Each unvisited vertex starts a fresh traversal, so disconnected parts
        of the graph are included. The DFS keeps an explicit stack of edge
        iterators to avoid Python's recursion limit on long chains.
        """
        visited: set[int] = set()
        post_order: list[int] = []

        for start in self.graph.vertices:
            if start in visited:
                continue
            visited.add(start)
            stack = [(start, iter(self.graph.vertices[start].edges))]
            while stack:
                vertex_id, children = stack[-1]
                for child in children:
                    if child not in visited:
                        visited.add(child)
                        stack.append((child, iter(self.graph.vertices[child].edges)))
                        break
                else:
                    stack.pop()
                    post_order.append(vertex_id)

        post_order.reverse()
        return post_order

    def get_ordered_transactions(self) -> list[int]:
        """
        All vertex ids sorted by timestamp, ties broken by ascending id.

        A vertex without a timestamp sorts as if its timestamp were 0.
        """
        return [
            v.id
            for v in sorted(self.graph, key=lambda v: (v.timestamp or 0, v.id))
        ]

    def get_connected_components_count(self) -> int:
        """
        Count forward-edge DFS scans needed to visit every vertex.

        Scans start from each still-unvisited vertex in insertion order and
        only follow outgoing edges.
        """
        visited: set[int] = set()
        components = 0

        for start in self.graph.vertices:
            if start in visited:
                continue
            components += 1
            visited.add(start)
            stack = [start]
            while stack:
                current = stack.pop()
                for neighbor in self.graph.vertices[current].edges:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        stack.append(neighbor)
        return components

    def count_leaf_nodes(self) -> int:
        return sum(1 for vertex in self.graph if vertex.is_leaf)

    def get_average_latency(self) -> float:
        """
        Mean of ``parent.timestamp - child.timestamp`` over every edge whose
        endpoints both carry a timestamp; 0 when there is no such edge.

        With children stamped later than their parents the result is negative.
        """
        total = 0
        pairs = 0
        for vertex in self.graph:
            if vertex.timestamp is None:
                continue
            for child in vertex.edges:
                child_ts = self.graph.vertices[child].timestamp
                if child_ts is None:
                    continue
                total += vertex.timestamp - child_ts
                pairs += 1
        if pairs == 0:
            return 0.0
        return total / pairs
