"""A falling-blocks puzzle game for the terminal, with screen-free game logic."""

__version__ = "0.1.0"
__all__ = ["__version__"]