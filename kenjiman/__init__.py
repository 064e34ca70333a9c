"""Rules and drawing for a two-player maze pellet game, and its 2D drawing toolkit."""

__version__ = "0.1.0"