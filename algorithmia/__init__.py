"""Classic algorithms for geometry, graphs, strings, sorting and dynamic programming."""

__version__ = "0.1.0"