"""Pixel-art sprite editor: frames, .ssp files, editing session, preview and Tkinter window."""

__version__ = "0.1.0"
__all__ = ["__version__"]