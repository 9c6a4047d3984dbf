"""
Statistics report for the command-line surface.

Collects every statistic the analysis service exposes into an ordered
mapping and renders it as text or JSON, rounding floats for display.
"""

from __future__ import annotations

import json
import math
import sys
from collections import OrderedDict
from typing import Any

from .analysis import GraphAnalysisService

# ── Display labels ───────────────────────────────────────────────────

LABELS: dict[str, str] = {
    "avg_depth": "AVG DAG DEPTH",
    "avg_transactions_per_depth": "AVG TXS PER DEPTH",
    "avg_in_references_per_node": "AVG REF",
    "is_bipartite": "IS BIPARTITE",
    "topological_sort": "TOPOLOGICAL SORT",
    "ordered_transactions": "ORDERED TXS",
    "connected_components": "CONNECTED COMPONENTS",
    "leaf_nodes": "LEAF NODES",
    "avg_latency": "AVG LATENCY",
}


def round_half_up(value: float, decimals: int) -> float:
    """Round ``value`` to ``decimals`` places, halves towards positive infinity.

    The value is nudged by machine epsilon first so that ``1.005`` rounds to
    ``1.01`` rather than falling victim to its binary representation.
    """
    factor = 10**decimals
    return math.floor((value + sys.float_info.epsilon) * factor + 0.5) / factor


def collect_statistics(service: GraphAnalysisService) -> OrderedDict[str, Any]:
    stats: OrderedDict[str, Any] = OrderedDict()
    stats["avg_depth"] = service.get_avg_depth()
    stats["avg_transactions_per_depth"] = service.get_avg_transaction_per_depth()
    stats["avg_in_references_per_node"] = service.get_avg_in_reference_per_node()
    stats["is_bipartite"] = service.is_bipartite()
    stats["topological_sort"] = service.topological_sort()
    stats["ordered_transactions"] = service.get_ordered_transactions()
    stats["connected_components"] = service.get_connected_components_count()
    stats["leaf_nodes"] = service.count_leaf_nodes()
    stats["avg_latency"] = service.get_average_latency()
    return stats


def _rounded(stats: dict[str, Any], decimals: int) -> OrderedDict[str, Any]:
    out: OrderedDict[str, Any] = OrderedDict()
    for key, value in stats.items():
        if isinstance(value, float):
            value = round_half_up(value, decimals)
        out[key] = value
    return out


def render_text(stats: dict[str, Any], decimals: int = 2) -> str:
    width = max(len(label) for label in LABELS.values())
    lines = []
    for key, value in _rounded(stats, decimals).items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        lines.append(f"> {LABELS.get(key, key).ljust(width)}: {value}")
    return "\n".join(lines)


def render_json(stats: dict[str, Any], decimals: int = 2) -> str:
    return json.dumps(_rounded(stats, decimals), indent=2)
