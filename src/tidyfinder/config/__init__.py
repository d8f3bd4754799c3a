"""Configuration package for TidyFinder."""
