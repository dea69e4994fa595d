"""
Spectrum Analysis Node for the Color Spectrum Analyzer.

This node runs the aggregation -> classification -> reporting pipeline over
an imported image and outputs a SpectrumReport.

Classes:
    SpectrumAnalysisNodeConfig: Configuration for spectrum analysis node

Functions:
    execute_spectrum_analysis_node: Pipeline executor for spectrum analysis nodes
    create_spectrum_analysis_node: Helper to build a node dictionary
"""

import random
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from SA_Libs.constants import DEFAULT_MAX_IMAGE_SIZE, NODE_TYPE_SPECTRUM_ANALYSIS
from SA_Libs.SpectrumLib.color_models import image_size
from SA_Libs.SpectrumLib.distribution_reporter import ChoiceFunction, SpectrumReport
from SA_Libs.SpectrumLib.spectrum_pipeline import analyze_image


@dataclass
class SpectrumAnalysisNodeConfig:
    """Configuration for spectrum analysis node execution.

    Attributes:
        max_size: Images larger than this on either side are downscaled first
        seed: Optional seed pinning the flavor commentary selection
    """
    max_size: int = DEFAULT_MAX_IMAGE_SIZE
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpectrumAnalysisNodeConfig":
        """Create from dictionary."""
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if normalized.get("max_size") is None:
            normalized.pop("max_size", None)
        else:
            normalized["max_size"] = int(normalized["max_size"])
        return cls(**normalized)

    def get_choice_function(self) -> ChoiceFunction:
        """Flavor selector: seeded when a seed is configured, else random.choice."""
        if self.seed is None:
            return random.choice
        return random.Random(self.seed).choice


def execute_spectrum_analysis_node(node: Dict[str, Any], inputs: List[Any]) -> SpectrumReport:
    """
    Pipeline executor for spectrum analysis nodes.

    Args:
        node: Node dictionary containing SpectrumAnalysisNodeConfig fields
        inputs: Should contain exactly one element: the input PIL Image

    Returns:
        SpectrumReport for the image

    Raises:
        ValueError: If inputs list is empty
        TypeError: If input is not a PIL Image
    """
    if not inputs:
        raise ValueError("Spectrum analysis node requires 1 input image")

    image = inputs[0]
    image_size(image)

    config = SpectrumAnalysisNodeConfig.from_dict(node)
    return analyze_image(
        image,
        max_size=config.max_size,
        choice=config.get_choice_function(),
    )


def create_spectrum_analysis_node(
    node_id: str,
    source_id: str,
    max_size: int = DEFAULT_MAX_IMAGE_SIZE,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Helper to create a spectrum analysis node dictionary.

    Args:
        node_id: Unique node identifier
        source_id: Id of the node producing the input image
        max_size: Downscale limit in pixels
        seed: Optional seed for the flavor commentary

    Returns:
        Node dictionary ready for chain execution
    """
    return {
        "id": node_id,
        "type": NODE_TYPE_SPECTRUM_ANALYSIS,
        "inputs": [source_id],
        "max_size": max_size,
        "seed": seed,
    }
