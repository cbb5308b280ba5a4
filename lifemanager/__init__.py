"""Models and view logic for pick-up packages, a watchlist, notifications and cycle tracking."""

__version__ = "0.1.0"