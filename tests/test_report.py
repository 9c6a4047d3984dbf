import json
from pathlib import Path

import pytest

from txdag.analysis import GraphAnalysisService
from txdag.builder import DAGBuilder
from txdag.report import collect_statistics, render_json, render_text, round_half_up

FILES = Path(__file__).parent / "files"


@pytest.fixture
def stats():
    dag = DAGBuilder().build_from_file(FILES / "database_original.txt")
    return collect_statistics(GraphAnalysisService(dag, 0))


@pytest.mark.parametrize(
    "value, decimals, expected",
    [
        (1.005, 2, 1.01),
        (4 / 3, 2, 1.33),
        (5 / 3, 3, 1.667),
        (2.5, 0, 3.0),
        (-1.125, 2, -1.12),
        (-2.5, 0, -2.0),
        (0.0, 2, 0.0),
    ],
)
def test_round_half_up(value, decimals, expected):
    assert round_half_up(value, decimals) == expected


def test_collect_statistics_keys(stats):
    assert list(stats) == [
        "avg_depth",
        "avg_transactions_per_depth",
        "avg_in_references_per_node",
        "is_bipartite",
        "topological_sort",
        "ordered_transactions",
        "connected_components",
        "leaf_nodes",
        "avg_latency",
    ]
    assert stats["topological_sort"] == [0, 1, 3, 2, 5, 4]
    assert stats["leaf_nodes"] == 2


def test_render_json_rounds_floats(stats):
    data = json.loads(render_json(stats, decimals=2))
    assert data["avg_depth"] == 1.33
    assert data["avg_transactions_per_depth"] == 2.5
    assert data["avg_in_references_per_node"] == 1.33
    assert data["avg_latency"] == -1.12
    assert data["is_bipartite"] is False
    assert data["connected_components"] == 1


def test_render_text(stats):
    text = render_text(stats, decimals=2)
    lines = text.splitlines()
    assert len(lines) == 9
    assert lines[0].startswith("> AVG DAG DEPTH")
    assert lines[0].endswith(": 1.33")
    assert any(line.endswith(": 0, 1, 3, 2, 5, 4") for line in lines)
    assert any("IS BIPARTITE" in line and line.endswith("False") for line in lines)
