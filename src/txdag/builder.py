"""
DAG Builder

Turns parsed transaction records into a :class:`DirectedAcyclicGraph`.

Vertex 0 is always the origin transaction (timestamp 0). Record ``i`` becomes
vertex ``i + 1`` and approves its two parents, given 1-indexed in the input
(parent id 1 is the origin).
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import CountMismatchError, InvalidInputError, SizeLimitError
from .graph import DirectedAcyclicGraph
from .io import TransactionRecord, parse_transactions, read_text

logger = logging.getLogger(__name__)

ORIGIN_ID = 0
DEFAULT_MAX_NODES = 100_000


class DAGBuilder:
    """
    Builds a transaction DAG from parsed records.

    Example usage:
        builder = DAGBuilder(max_nodes=100_000)
        dag = builder.build_from_file("database.txt")

    Any hard failure while adding edges (cycle, missing timestamp) aborts the
    whole build; no partial graph is returned.
    """

    def __init__(self, max_nodes: int = DEFAULT_MAX_NODES) -> None:
        """
        Args:
            max_nodes: Largest declared transaction count accepted by build()
        """
        self.max_nodes = max_nodes

    def build(
        self, count: int | None, records: list[TransactionRecord]
    ) -> DirectedAcyclicGraph:
        """
        Build a DAG from a declared count and its records.

        Raises:
            InvalidInputError: Unparseable count or a non-positive parent id
            CountMismatchError: ``count`` differs from ``len(records)``
            SizeLimitError: ``count`` exceeds ``max_nodes``
            CycleError / InvalidTimestampError: from edge insertion
        """
        if count is None:
            raise InvalidInputError("Error parsing the file.")
        if count != len(records):
            raise CountMismatchError(count, len(records))
        if count > self.max_nodes:
            raise SizeLimitError(self.max_nodes, count)

        logger.info(f"Building DAG from {count} transactions")

        dag = DirectedAcyclicGraph()
        dag.add_vertex(ORIGIN_ID, 0)
        for i, record in enumerate(records):
            dag.add_vertex(i + 1, record.timestamp)

        for i, record in enumerate(records):
            if record.left_parent_id <= 0 or record.right_parent_id <= 0:
                raise InvalidInputError(
                    f"Transaction {i + 1}: left or right parent id must be positive, "
                    f"got {record.left_parent_id} and {record.right_parent_id}."
                )
            dag.add_edge(record.left_parent_id - 1, i + 1)
            dag.add_edge(record.right_parent_id - 1, i + 1)

        logger.info(
            f"DAG built successfully: {len(dag)} vertices, {dag.edge_count()} edges"
        )
        return dag

    def build_from_file(self, path: Path | str) -> DirectedAcyclicGraph:
        """Read, parse and build the transaction database at ``path``."""
        count, records = parse_transactions(read_text(path))
        return self.build(count, records)
