from . import detect, view

__all__ = ["detect", "view"]
