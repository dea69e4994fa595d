"""
Image Import Node for the Color Spectrum Analyzer.

This module provides the ImageImportNode class that loads an uploaded image
from the file system and hands it to the analysis node as an RGBA PIL Image.

Classes:
    ImageImportNode: Data model for image import node

Functions:
    execute_import_image_node: Pipeline executor for image import nodes
    get_supported_image_formats: Get list of supported image formats
    is_supported_format: Check a path's extension against supported formats
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from SA_Libs.constants import NODE_TYPE_IMAGE_IMPORT, SUPPORTED_STANDARD_IMAGES
from SA_Libs.pillow_compat import Image

logger = logging.getLogger(__name__)


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported image formats.

    Returns:
        List of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(SUPPORTED_STANDARD_IMAGES)


def is_supported_format(file_path: Path) -> bool:
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


@dataclass
class ImageImportNode:
    """Data model for an image import node.

    Attributes:
        node_id: Unique identifier for this node
        file_path: Path to the image file to import
        cache_image: Whether to cache the loaded image (default True)
        cached_image: Cached PIL Image object
    """

    node_id: str
    file_path: Path
    cache_image: bool = True
    cached_image: Optional[Any] = field(default=None, init=False)

    def __post_init__(self):
        """Validate input parameters."""
        self.file_path = Path(self.file_path)

        if not self.file_path.exists():
            raise FileNotFoundError(f"Image file not found: {self.file_path}")

        if not self.file_path.is_file():
            raise ValueError(f"Path is not a file: {self.file_path}")

        if not is_supported_format(self.file_path):
            raise ValueError(f"Unsupported image format: {self.file_path.suffix}")

    def load_image(self) -> Any:
        """
        Load the image from disk as RGBA.

        Animated formats contribute their first frame.

        Returns:
            PIL Image object

        Raises:
            IOError: If image cannot be decoded
        """
        if self.cached_image is not None and self.cache_image:
            return self.cached_image

        try:
            with Image.open(self.file_path) as img:
                img.load()
                image = img.convert("RGBA")
        except OSError as e:
            raise IOError(f"Failed to load image from {self.file_path}: {e}") from e

        logger.debug(f"Loaded {self.file_path.name} ({image.width}x{image.height})")

        if self.cache_image:
            self.cached_image = image

        return image

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation for serialization."""
        return {
            "node_id": self.node_id,
            "file_path": str(self.file_path),
            "cache_image": self.cache_image,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ImageImportNode":
        """Create from dictionary representation."""
        return cls(
            node_id=data.get("node_id", ""),
            file_path=Path(data.get("file_path", "")),
            cache_image=data.get("cache_image", True),
        )


def execute_import_image_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for image import nodes.

    Args:
        node: Node dictionary containing:
            - 'file_path': Path to image file (required)
            - 'cache_image': Whether to cache the loaded image (default True)
        inputs: Should be empty list (import nodes have no inputs)

    Returns:
        PIL Image object in RGBA mode

    Raises:
        KeyError: If required fields are missing
        FileNotFoundError: If image file not found
        IOError: If image cannot be loaded
    """
    file_path = node.get("file_path")
    if not file_path:
        raise KeyError("Image import node missing required 'file_path' field")

    node_id = node.get("id", node.get("node_id", "unknown"))

    import_node = ImageImportNode(
        node_id=node_id,
        file_path=Path(file_path),
        cache_image=node.get("cache_image", True),
    )

    return import_node.load_image()


def create_image_import_node(node_id: str, file_path: Path) -> Dict[str, Any]:
    """Helper to create an image import node dictionary."""
    return {
        "id": node_id,
        "type": NODE_TYPE_IMAGE_IMPORT,
        "inputs": [],
        "file_path": str(file_path),
        "cache_image": True,
    }
