"""TidyFinder command line interface."""

from tidyfinder.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
