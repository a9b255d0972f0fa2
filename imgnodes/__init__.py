"""Node-based image processing: image filter nodes and a graph that runs them."""

__version__ = "0.1.0"