"""A terminal chain-reaction board game: board, cursor, explosions, display and command."""

__version__ = "0.1.0"
__all__ = ["__version__"]