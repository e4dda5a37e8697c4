"""Raster image editing core: geometry, colours, flood fill, images, units, formats and documents."""

__version__ = "0.4.0"
__all__ = ["colors", "document", "fill", "formats", "geometry", "image", "units"]