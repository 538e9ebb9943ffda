"""Planar geometry overlay, relate, line merging, snapping and a spherical K-D tree."""

__version__ = "0.1.0"