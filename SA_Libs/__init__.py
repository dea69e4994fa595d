"""
SA_Libs - Color Spectrum Analyzer Library Modules

This package contains the color spectrum analysis pipeline and the
collaborators built on top of it, organized into specialized sub-packages:

- SpectrumLib: Pixel aggregation, wavelength classification and distribution reporting
- NodesLib: Pipeline nodes (image import, spectrum analysis, color table, color quiz)
- PipelineLib: Node executor registry and chain runner
"""

__version__ = "0.1.0"
