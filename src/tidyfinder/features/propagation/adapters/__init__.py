"""Adapters for the propagation feature."""
