"""Circumcircle geometry on integer points and a three-point circle board model."""

__version__ = "0.1.0"
__all__ = ["board", "geometry"]