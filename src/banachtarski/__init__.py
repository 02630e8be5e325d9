"""Interactive animation of the Banach-Tarski decomposition of the free group F2."""

__version__ = "0.1.0"
