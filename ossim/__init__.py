"""CPU scheduling and page replacement simulations, with small practice utilities."""

__version__ = "0.1.0"