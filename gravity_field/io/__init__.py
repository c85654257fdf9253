"""Frame export."""

from gravity_field.io.gif_exporter import GIFExporter

__all__ = ["GIFExporter"]
