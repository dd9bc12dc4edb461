"""Linked binary tree nodes with traversals, shape metrics, an ASCII renderer and demos."""

__version__ = "0.1.0"
__all__ = ["__version__"]