"""
PipelineLib - Node registry and chain execution

This module provides the executor registry and the sequential runner that
connects image import, spectrum analysis and the display nodes.
"""

from SA_Libs.PipelineLib.node_executors import (
    NodeExecutorRegistry,
    get_default_registry,
    register_default_executors,
)
from SA_Libs.PipelineLib.pipeline_runner import (
    PipelineExecutionError,
    execute_chain,
    get_chain_summary,
)

__all__ = [
    "NodeExecutorRegistry",
    "get_default_registry",
    "register_default_executors",
    "PipelineExecutionError",
    "execute_chain",
    "get_chain_summary",
]
