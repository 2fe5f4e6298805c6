"""A grid-based snake game with wrap-around edges, played with pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]