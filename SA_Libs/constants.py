"""
Constants and configuration values for the Color Spectrum Analyzer.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Channel handling
CHANNEL_MAX = 255
RGB_CHANNELS = 3
RGBA_CHANNELS = 4
SUPPORTED_CHANNEL_STRIDES = (RGB_CHANNELS, RGBA_CHANNELS)

# Wavelength centers (nm) used by the weighted estimate
RED_CENTER_NM = 680
GREEN_CENTER_NM = 530
BLUE_CENTER_NM = 470

# Black is reported as deep violet
BLACK_WAVELENGTH_NM = 400

# Secondary color overrides (weights above threshold on two channels)
SECONDARY_WEIGHT_THRESHOLD = 0.7
YELLOW_WAVELENGTH_NM = 580
MAGENTA_WAVELENGTH_NM = 420
CYAN_WAVELENGTH_NM = 490

# Visible spectrum clamp
MIN_WAVELENGTH_NM = 380
MAX_WAVELENGTH_NM = 750

# Band ladder, evaluated high to low (first match wins)
COLOR_BANDS = (
    (700, "Deep Red"),
    (650, "Red"),
    (590, "Orange"),
    (570, "Yellow"),
    (495, "Green"),
    (450, "Blue"),
    (380, "Violet"),
)
FALLBACK_BAND_NAME = "Infrared"

# Commentary rules
DOMINANCE_PERCENT_THRESHOLD = 50
RAINBOW_DISTINCT_THRESHOLD = 100
MINIMALIST_DISTINCT_THRESHOLD = 10

EMPTY_IMAGE_COMMENT = "No colors found. Upload an image to see its spectrum!"
DOMINANCE_COMMENT_TEMPLATE = "This image is {name} chic! {percentage:.1f}% dominance detected! 👑"
RAINBOW_EXPLOSION_COMMENT = (
    "You have discovered the mythical rainbow explosion! So many colors, so little time! 🌈💥"
)
MINIMALIST_COMMENT = (
    "Minimalist vibes detected! Sometimes less is more... scientifically speaking! 🎯"
)
SUMMARY_COMMENT_TEMPLATE = (
    "{flavor} Found {count} unique wavelengths ranging from {shortest:.0f}nm to {longest:.0f}nm!"
)
FLAVOR_COMMENTS = (
    "Behold, the majestic colors of your image… now in scientific formation! 🧬",
    "This is what happens when physics meets art! 🎨⚛️",
    "Your image has been wavelength-ified! Science is beautiful! ✨",
    "Converting chaos into organized spectrum magic! 🌈",
    "Pixel archaeology complete! These colors have stories to tell! 📸",
)

# Image import
DEFAULT_MAX_IMAGE_SIZE = 800
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}

# Color table
DEFAULT_TABLE_LIMIT = 20

# Color quiz
QUIZ_MIN_COLORS = 2
QUIZ_MAX_OPTIONS = 4
DEFAULT_SHAPE = "circle"
SURPRISE_SHAPE = "surprise"
SHAPE_UNLOCK_ORDER = (
    "circle",
    "rectangle",
    "spiral",
    "arc",
    "triangle",
    "star",
    "banana",
    "surprise",
)

# Node types
NODE_TYPE_IMAGE_IMPORT = "Image Import"
NODE_TYPE_SPECTRUM_ANALYSIS = "Spectrum Analysis"
NODE_TYPE_COLOR_TABLE = "Color Table"
NODE_TYPE_COLOR_QUIZ = "Color Quiz"

# Node field names
FIELD_NODE_ID = "id"
FIELD_NODE_TYPE = "type"
FIELD_NODE_INPUTS = "inputs"
