"""TidyFinder: Finder view preferences, profiles and template folder settings."""

__version__ = "0.1.0"
