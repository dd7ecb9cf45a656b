"""plychess: terminal chess with a one-ply look-ahead computer opponent."""

__version__ = "0.1.0"
