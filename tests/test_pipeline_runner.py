"""
Tests for the chain runner.

Tests cover:
- Result propagation between nodes
- Validation of ids and inputs
- Error wrapping with node context
- A full import -> analysis -> table -> quiz chain
"""

import pytest

from SA_Libs.NodesLib.color_quiz_node import QuizRound, create_color_quiz_node
from SA_Libs.NodesLib.color_table_node import create_color_table_node
from SA_Libs.NodesLib.image_import_node import create_image_import_node
from SA_Libs.NodesLib.spectrum_analysis_node import create_spectrum_analysis_node
from SA_Libs.PipelineLib.node_executors import NodeExecutorRegistry
from SA_Libs.PipelineLib.pipeline_runner import (
    PipelineExecutionError,
    execute_chain,
    get_chain_summary,
)
from SA_Libs.SpectrumLib.distribution_reporter import SpectrumReport


@pytest.fixture
def registry():
    registry = NodeExecutorRegistry()
    registry.register("Source", lambda node, inputs: node["value"])
    registry.register("Sum", lambda node, inputs: sum(inputs))
    registry.register("Fail", lambda node, inputs: 1 / 0)
    return registry


class TestExecuteChain:
    """Tests for execute_chain function."""

    def test_results_flow_through_inputs(self, registry):
        nodes = [
            {"id": "a", "type": "Source", "value": 2},
            {"id": "b", "type": "Source", "value": 3},
            {"id": "total", "type": "Sum", "inputs": ["a", "b"]},
        ]

        results = execute_chain(nodes, registry)

        assert results == {"a": 2, "b": 3, "total": 5}

    def test_unknown_type(self, registry):
        with pytest.raises(KeyError):
            execute_chain([{"id": "x", "type": "Nope"}], registry)

    def test_missing_id(self, registry):
        with pytest.raises(ValueError):
            execute_chain([{"type": "Source", "value": 1}], registry)

    def test_duplicate_id(self, registry):
        nodes = [
            {"id": "a", "type": "Source", "value": 1},
            {"id": "a", "type": "Source", "value": 2},
        ]
        with pytest.raises(ValueError):
            execute_chain(nodes, registry)

    def test_input_must_run_first(self, registry):
        nodes = [
            {"id": "total", "type": "Sum", "inputs": ["a"]},
            {"id": "a", "type": "Source", "value": 1},
        ]
        with pytest.raises(ValueError):
            execute_chain(nodes, registry)

    def test_executor_error_names_node(self, registry):
        with pytest.raises(PipelineExecutionError) as excinfo:
            execute_chain([{"id": "boom", "type": "Fail"}], registry)

        assert excinfo.value.node_id == "boom"
        assert "boom" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, ZeroDivisionError)

    def test_full_default_chain(self, image_file):
        nodes = [
            create_image_import_node("import", image_file),
            create_spectrum_analysis_node("analysis", "import", seed=1),
            create_color_table_node("table", "analysis", limit=5),
            create_color_quiz_node("quiz", "analysis", seed=1),
        ]

        results = execute_chain(nodes)

        report = results["analysis"]
        assert isinstance(report, SpectrumReport)
        assert report.total_pixels == 100
        assert [row["hex"] for row in results["table"]] == ["#FF0000", "#0000FF"]
        assert isinstance(results["quiz"], QuizRound)

    def test_missing_image_wrapped(self, tmp_path):
        nodes = [create_image_import_node("import", tmp_path / "missing.png")]

        with pytest.raises(PipelineExecutionError) as excinfo:
            execute_chain(nodes)

        assert isinstance(excinfo.value.__cause__, FileNotFoundError)


class TestChainSummary:
    """Tests for get_chain_summary function."""

    def test_summary_lists_nodes(self):
        nodes = [
            {"id": "import", "type": "Image Import"},
            {"id": "analysis", "type": "Spectrum Analysis", "inputs": ["import"]},
        ]

        summary = get_chain_summary(nodes)

        assert summary.splitlines() == [
            "Chain Summary:",
            "  Total Nodes: 2",
            "  - Image Import (import) (source)",
            "  - Spectrum Analysis (analysis) <- [import]",
        ]
