"""
SpectrumLib - Color spectrum analysis pipeline

This module provides pixel aggregation, wavelength classification and
distribution reporting for the Color Spectrum Analyzer.
"""

from SA_Libs.SpectrumLib.color_models import (
    ColorCounts,
    ColorRecord,
    InvalidPixelBufferError,
    PixelBuffer,
    RgbColor,
    hex_to_rgb,
    rgb_to_hex,
)
from SA_Libs.SpectrumLib.wavelength_classifier import get_color_name, rgb_to_wavelength
from SA_Libs.SpectrumLib.pixel_aggregator import aggregate_array, aggregate_pixels
from SA_Libs.SpectrumLib.distribution_reporter import (
    SpectrumReport,
    build_color_records,
    build_report,
    generate_commentary,
    highest_count_record,
    longest_wavelength_record,
)
from SA_Libs.SpectrumLib.spectrum_pipeline import (
    analyze_image,
    analyze_pixel_buffer,
    downscale_image,
)

__all__ = [
    "ColorCounts",
    "ColorRecord",
    "InvalidPixelBufferError",
    "PixelBuffer",
    "RgbColor",
    "hex_to_rgb",
    "rgb_to_hex",
    "get_color_name",
    "rgb_to_wavelength",
    "aggregate_array",
    "aggregate_pixels",
    "SpectrumReport",
    "build_color_records",
    "build_report",
    "generate_commentary",
    "highest_count_record",
    "longest_wavelength_record",
    "analyze_image",
    "analyze_pixel_buffer",
    "downscale_image",
]
