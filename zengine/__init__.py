"""Maths, cameras, controllers, input devices, layers, meshes and pipelines for a small graphics engine."""

__version__ = "0.1.0"