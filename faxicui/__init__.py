"""Frame-buffer drawing toolkit for embedded displays, with a pygame simulator."""

__version__ = "0.1.0"
__all__ = ["types", "display", "buffer", "base", "line", "drawer", "simulator"]