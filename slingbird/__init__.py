"""Slingshot physics arcade game with four block-tower levels."""

__version__ = "0.1.0"
__all__ = ["geometry", "entities", "levels", "world", "app"]