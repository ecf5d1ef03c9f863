"""Scene loading, ray intersection, shadows and shading for .rt scene files."""

__version__ = "0.1.0"