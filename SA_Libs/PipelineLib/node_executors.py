"""
Node Executors Registry.

Maps node type names to executor callables so a chain of node dictionaries
can be run without knowing the concrete node modules.

Classes:
    NodeExecutorRegistry: Registry for node executors

Functions:
    get_default_registry: Lazily created registry holding the built-in nodes
    register_default_executors: Register all built-in node executors
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from SA_Libs.constants import (
    NODE_TYPE_COLOR_QUIZ,
    NODE_TYPE_COLOR_TABLE,
    NODE_TYPE_IMAGE_IMPORT,
    NODE_TYPE_SPECTRUM_ANALYSIS,
)

logger = logging.getLogger(__name__)

# Type alias for executor function
ExecutorFunction = Callable[[Dict[str, Any], List[Any]], Any]


class NodeExecutorRegistry:
    """
    Registry for node type executors.

    Example:
        >>> registry = NodeExecutorRegistry()
        >>> registry.register("Spectrum Analysis", execute_spectrum_analysis_node)
        >>> report = registry.execute("Spectrum Analysis", node_dict, [image])
    """

    def __init__(self):
        self._executors: Dict[str, ExecutorFunction] = {}
        self._node_metadata: Dict[str, Dict[str, Any]] = {}

    def register(
        self,
        node_type: str,
        executor: ExecutorFunction,
        description: str = "",
        input_count: int = 0,
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register a node executor.

        Args:
            node_type: Unique identifier for the node type (e.g., "Color Table")
            executor: Callable accepting (node_dict, inputs)
            description: Human-readable description of the node
            input_count: Expected number of inputs (0 for source nodes)
            tags: Optional list of tags for categorization

        Raises:
            ValueError: If node_type is empty or executor is not callable
            RuntimeError: If node_type is already registered
        """
        node_type = str(node_type).strip()

        if not node_type:
            raise ValueError("node_type cannot be empty")

        if not callable(executor):
            raise ValueError(f"executor must be callable, got {type(executor)}")

        if node_type in self._executors:
            raise RuntimeError(
                f"Node type '{node_type}' is already registered. "
                f"Use unregister() first to replace it."
            )

        self._executors[node_type] = executor
        self._node_metadata[node_type] = {
            "description": str(description),
            "input_count": int(input_count),
            "tags": list(tags) if tags else [],
        }

        logger.debug(f"Registered executor for node type: {node_type}")

    def unregister(self, node_type: str) -> bool:
        node_type = str(node_type).strip()

        if node_type not in self._executors:
            return False

        del self._executors[node_type]
        del self._node_metadata[node_type]
        logger.debug(f"Unregistered executor for node type: {node_type}")
        return True

    def get_executor(self, node_type: str) -> ExecutorFunction:
        """
        Get the executor for a node type.

        Raises:
            KeyError: If node_type is not registered
        """
        node_type = str(node_type).strip()

        if node_type not in self._executors:
            available = ", ".join(self.list_node_types())
            raise KeyError(
                f"No executor registered for node type '{node_type}'. "
                f"Available types: {available}"
            )

        return self._executors[node_type]

    def has_executor(self, node_type: str) -> bool:
        return str(node_type).strip() in self._executors

    def execute(self, node_type: str, node_dict: Dict[str, Any], inputs: List[Any]) -> Any:
        return self.get_executor(node_type)(node_dict, inputs)

    def list_node_types(self) -> List[str]:
        return sorted(self._executors)

    def get_metadata(self, node_type: str) -> Dict[str, Any]:
        node_type = str(node_type).strip()

        if node_type not in self._node_metadata:
            raise KeyError(f"No metadata for node type: {node_type}")

        return dict(self._node_metadata[node_type])

    def filter_by_tag(self, tag: str) -> List[str]:
        """Sorted node types carrying `tag` (case-insensitive)."""
        tag = str(tag).strip().lower()
        return sorted(
            node_type
            for node_type, meta in self._node_metadata.items()
            if tag in [t.lower() for t in meta["tags"]]
        )

    def clear(self) -> None:
        """Clear all registered executors. Use with caution."""
        self._executors.clear()
        self._node_metadata.clear()
        logger.warning("Node executor registry cleared")


_default_registry: Optional[NodeExecutorRegistry] = None


def get_default_registry() -> NodeExecutorRegistry:
    """
    Get the default registry, creating it and registering the built-in
    executors on first call.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = NodeExecutorRegistry()
        register_default_executors(_default_registry)

    return _default_registry


def register_default_executors(registry: NodeExecutorRegistry) -> None:
    """
    Register all built-in node executors.

    This function registers:
    - Image Import node
    - Spectrum Analysis node
    - Color Table node
    - Color Quiz node

    Args:
        registry: The registry to register executors with
    """
    from SA_Libs.NodesLib.image_import_node import execute_import_image_node
    from SA_Libs.NodesLib.spectrum_analysis_node import execute_spectrum_analysis_node
    from SA_Libs.NodesLib.color_table_node import execute_color_table_node
    from SA_Libs.NodesLib.color_quiz_node import execute_color_quiz_node

    registry.register(
        node_type=NODE_TYPE_IMAGE_IMPORT,
        executor=execute_import_image_node,
        description="Import an image from disk (PNG, JPG, BMP, GIF, etc.)",
        input_count=0,
        tags=["input", "image", "source"],
    )

    registry.register(
        node_type=NODE_TYPE_SPECTRUM_ANALYSIS,
        executor=execute_spectrum_analysis_node,
        description="Aggregate colors, estimate wavelengths and summarize the distribution",
        input_count=1,
        tags=["processing", "color", "spectrum"],
    )

    registry.register(
        node_type=NODE_TYPE_COLOR_TABLE,
        executor=execute_color_table_node,
        description="Format the leading colors of a report as table rows",
        input_count=1,
        tags=["output", "table"],
    )

    registry.register(
        node_type=NODE_TYPE_COLOR_QUIZ,
        executor=execute_color_quiz_node,
        description="Draw a 'which color appears most' quiz round",
        input_count=1,
        tags=["output", "game"],
    )

    logger.info("Registered default node executors")
