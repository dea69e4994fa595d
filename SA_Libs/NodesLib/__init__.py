"""
Color Spectrum Analyzer Nodes Library.

This module contains the node implementations that run in a pipeline chain.

Modules:
    image_import_node: Image import node for loading uploads
    spectrum_analysis_node: Runs the spectrum analysis over an image
    color_table_node: Formats report records as display rows
    color_quiz_node: Quiz rounds and game session state
"""

from SA_Libs.NodesLib.image_import_node import (
    ImageImportNode,
    execute_import_image_node,
    create_image_import_node,
    get_supported_image_formats,
    is_supported_format,
)
from SA_Libs.NodesLib.spectrum_analysis_node import (
    SpectrumAnalysisNodeConfig,
    execute_spectrum_analysis_node,
    create_spectrum_analysis_node,
)
from SA_Libs.NodesLib.color_table_node import (
    format_color_table,
    render_color_table,
    execute_color_table_node,
    create_color_table_node,
)
from SA_Libs.NodesLib.color_quiz_node import (
    GameSession,
    InsufficientColorsError,
    QuizRound,
    ShapeLockedError,
    start_round,
    unlocked_shapes_for_score,
    execute_color_quiz_node,
    create_color_quiz_node,
)

__all__ = [
    "ImageImportNode",
    "execute_import_image_node",
    "create_image_import_node",
    "get_supported_image_formats",
    "is_supported_format",
    "SpectrumAnalysisNodeConfig",
    "execute_spectrum_analysis_node",
    "create_spectrum_analysis_node",
    "format_color_table",
    "render_color_table",
    "execute_color_table_node",
    "create_color_table_node",
    "GameSession",
    "InsufficientColorsError",
    "QuizRound",
    "ShapeLockedError",
    "start_round",
    "unlocked_shapes_for_score",
    "execute_color_quiz_node",
    "create_color_quiz_node",
]
