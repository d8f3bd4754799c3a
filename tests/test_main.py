"""Smoke tests for unified entry points.

These tests assert that `python -m tidyfinder` and the console script
both resolve to the CLI's `main` function exposed under `tidyfinder.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m tidyfinder` path exposes a `main` callable."""
    m = import_module("tidyfinder.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `tidyfinder.ui.cli:main` and is importable."""
    m = import_module("tidyfinder.ui.cli")
    assert hasattr(m, "main")
