"""Rectangular area partitioning with a scalable quadtree, a channel graph and tree demos."""

__version__ = "0.1.0"

__all__ = ["__version__"]