"""A tile-map game: collect all coins, then reach the exit."""

__version__ = "1.0.0"