"""
Transaction DAG analysis.

Builds a directed acyclic graph of transactions from a parent-reference
database, rejecting cycles as edges are inserted, and computes depth,
fan-in, ordering, component and latency statistics over it.
"""

from .analysis import GraphAnalysisService
from .builder import DAGBuilder
from .config import AnalysisConfig, load_config
from .errors import (
    ConfigError,
    CountMismatchError,
    CycleError,
    DAGError,
    InvalidInputError,
    InvalidTimestampError,
    NodeNotFoundError,
    SizeLimitError,
)
from .graph import DirectedAcyclicGraph, EdgeResult
from .io import TransactionRecord, parse_transactions, read_text
from .node import Vertex

__all__ = [
    # Graph
    "Vertex",
    "DirectedAcyclicGraph",
    "EdgeResult",
    # Analysis
    "GraphAnalysisService",
    # Building
    "DAGBuilder",
    "TransactionRecord",
    "parse_transactions",
    "read_text",
    # Configuration
    "AnalysisConfig",
    "load_config",
    # Errors
    "DAGError",
    "InvalidInputError",
    "CountMismatchError",
    "SizeLimitError",
    "NodeNotFoundError",
    "CycleError",
    "InvalidTimestampError",
    "ConfigError",
]
