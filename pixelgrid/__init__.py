"""A raster editor for line, circle, star and fill algorithms on a pixel grid."""

__version__ = "0.1.0"