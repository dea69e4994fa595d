"""
Wavelength classification for RGB colors.

Maps an RGB triple onto an approximate visible-light wavelength and names the
spectral band a wavelength falls in. The mapping is a weighted heuristic over
fixed red/green/blue centers, not a colorimetric conversion.

Functions:
    rgb_to_wavelength: Approximate dominant wavelength (nm) of an RGB color
    get_color_name: Band label for a wavelength
"""

from typing import Tuple

from SA_Libs.constants import (
    BLACK_WAVELENGTH_NM,
    BLUE_CENTER_NM,
    CHANNEL_MAX,
    COLOR_BANDS,
    CYAN_WAVELENGTH_NM,
    FALLBACK_BAND_NAME,
    GREEN_CENTER_NM,
    MAGENTA_WAVELENGTH_NM,
    MAX_WAVELENGTH_NM,
    MIN_WAVELENGTH_NM,
    RED_CENTER_NM,
    SECONDARY_WEIGHT_THRESHOLD,
    YELLOW_WAVELENGTH_NM,
)


def _channel_weights(r: int, g: int, b: int) -> Tuple[float, float, float]:
    r_norm = r / CHANNEL_MAX
    g_norm = g / CHANNEL_MAX
    b_norm = b / CHANNEL_MAX
    peak = max(r_norm, g_norm, b_norm)
    return r_norm / peak, g_norm / peak, b_norm / peak


def _clamp_wavelength(value: float) -> float:
    return max(float(MIN_WAVELENGTH_NM), min(float(MAX_WAVELENGTH_NM), value))


def rgb_to_wavelength(r: int, g: int, b: int) -> float:
    """
    Approximate the dominant wavelength of an RGB color.

    Each channel is weighted relative to the strongest channel and the
    weights are applied to fixed centers (red 680nm, green 530nm, blue 470nm).
    Two strong channels short-circuit to a secondary color:
    red+green -> 580 (yellow), red+blue -> 420, green+blue -> 490 (cyan),
    checked in that order. Black maps to 400.

    Args:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)

    Returns:
        Wavelength in nanometers, always within [380, 750]
    """
    if r == 0 and g == 0 and b == 0:
        return _clamp_wavelength(BLACK_WAVELENGTH_NM)

    red_weight, green_weight, blue_weight = _channel_weights(r, g, b)

    if red_weight > SECONDARY_WEIGHT_THRESHOLD and green_weight > SECONDARY_WEIGHT_THRESHOLD:
        return _clamp_wavelength(YELLOW_WAVELENGTH_NM)
    if red_weight > SECONDARY_WEIGHT_THRESHOLD and blue_weight > SECONDARY_WEIGHT_THRESHOLD:
        return _clamp_wavelength(MAGENTA_WAVELENGTH_NM)
    if green_weight > SECONDARY_WEIGHT_THRESHOLD and blue_weight > SECONDARY_WEIGHT_THRESHOLD:
        return _clamp_wavelength(CYAN_WAVELENGTH_NM)

    wavelength = (
        red_weight * RED_CENTER_NM
        + green_weight * GREEN_CENTER_NM
        + blue_weight * BLUE_CENTER_NM
    )
    return _clamp_wavelength(wavelength)


def get_color_name(wavelength: float) -> str:
    """Return the band label for a wavelength; thresholds are inclusive lower bounds."""
    for lower_bound, name in COLOR_BANDS:
        if wavelength >= lower_bound:
            return name
    return FALLBACK_BAND_NAME
