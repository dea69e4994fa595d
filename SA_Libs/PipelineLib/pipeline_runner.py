"""
Sequential execution of node chains.

A chain is an ordered list of node dictionaries. Each node names its
executor through 'type' and the nodes it reads from through 'inputs'; a
node may only read from nodes listed before it.

Functions:
    execute_chain: Run a chain and collect each node's result
    get_chain_summary: Human-readable description of a chain
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from SA_Libs.constants import FIELD_NODE_ID, FIELD_NODE_INPUTS, FIELD_NODE_TYPE
from SA_Libs.PipelineLib.node_executors import NodeExecutorRegistry, get_default_registry

logger = logging.getLogger(__name__)


class PipelineExecutionError(RuntimeError):
    """Raised when a node executor fails; the original error is chained."""

    def __init__(self, node_id: str, error: Exception):
        super().__init__(f"Error executing node {node_id}: {error}")
        self.node_id = node_id


def execute_chain(
    nodes: Sequence[Dict[str, Any]],
    registry: Optional[NodeExecutorRegistry] = None,
) -> Dict[str, Any]:
    """
    Execute nodes in order, feeding each the results of its inputs.

    Args:
        nodes: Node dictionaries with 'id', 'type' and optional 'inputs'
        registry: Executor registry (default: get_default_registry())

    Returns:
        Dictionary mapping node_id -> execution result

    Raises:
        ValueError: If a node id is missing or duplicated, or an input
            refers to a node that has not run yet
        KeyError: If a node type has no registered executor
        PipelineExecutionError: If an executor raises
    """
    registry = registry or get_default_registry()
    results: Dict[str, Any] = {}

    for node in nodes:
        node_id = str(node.get(FIELD_NODE_ID, "")).strip()
        if not node_id:
            raise ValueError("Every node requires an 'id'")
        if node_id in results:
            raise ValueError(f"Duplicate node id: {node_id}")

        executor = registry.get_executor(node.get(FIELD_NODE_TYPE, ""))

        input_ids: List[str] = list(node.get(FIELD_NODE_INPUTS, []))
        missing = [dep_id for dep_id in input_ids if dep_id not in results]
        if missing:
            raise ValueError(f"Node {node_id} depends on nodes not yet executed: {missing}")

        inputs = [results[dep_id] for dep_id in input_ids]
        logger.debug(f"Executing node {node_id} ({node.get(FIELD_NODE_TYPE)})")

        try:
            results[node_id] = executor(node, inputs)
        except Exception as e:
            raise PipelineExecutionError(node_id, e) from e

    return results


def get_chain_summary(nodes: Sequence[Dict[str, Any]]) -> str:
    """
    Generate human-readable summary of a chain.

    Example:
        >>> print(get_chain_summary(nodes))
        Chain Summary:
          Total Nodes: 2
          - Image Import (import) (source)
          - Spectrum Analysis (analysis) <- [import]
    """
    lines = [
        "Chain Summary:",
        f"  Total Nodes: {len(nodes)}",
    ]

    for node in nodes:
        node_id = node.get(FIELD_NODE_ID, "unknown")
        node_type = node.get(FIELD_NODE_TYPE, "Unknown")
        inputs = node.get(FIELD_NODE_INPUTS, [])
        input_str = f" <- [{', '.join(inputs)}]" if inputs else " (source)"
        lines.append(f"  - {node_type} ({node_id}){input_str}")

    return "\n".join(lines)
