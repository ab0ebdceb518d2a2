"""Extract, filter and write 4-connected components of binary PGM images."""

__version__ = "0.1.0"
__all__ = ["__version__"]