"""
Pillow import wrapper for the spectrum analyzer.

Every module that touches decoded images imports `Image` from here, so the
Pillow dependency is resolved (and reported) in a single place.
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil_image = _import("PIL.Image")

if _pil_image is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

Image = _pil_image

# Class object for isinstance checks against decoded images
ImageClass = getattr(_pil_image, "Image")

# Resampling filter used when downscaling uploads (Pillow >= 9.1 moved it)
_resampling = getattr(_pil_image, "Resampling", _pil_image)
RESAMPLE_FILTER = _resampling.BILINEAR
