"""Zone map data structures, a binary reader, spatial queries, an editor camera and volume maps."""

__version__ = "0.1.0"