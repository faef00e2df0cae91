"""Polygonal mesh import from CSV files and export to the AVS UCD ASCII format."""

__version__ = "1.0.0"
__all__ = ["cli", "importer", "mesh", "ucd"]