"""Various utilities."""
