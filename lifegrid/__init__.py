"""Conway's Game of Life on a bounded grid with immortal cells, and a pygame front end."""

__version__ = "1.0.0"
__all__ = ["__version__"]