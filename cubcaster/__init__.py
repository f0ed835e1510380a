"""Raycasting maze viewer: .cub scene parsing, ray casting and a pygame window."""

__version__ = "0.1.0"