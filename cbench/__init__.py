"""Small systems experiments and the leveled logger they share."""

__version__ = "0.1.0"
__all__ = ["__version__"]