"""Display management for CLI interface."""

from tidyfinder.ui.cli.display.profiles import ProfilesDisplay
from tidyfinder.ui.cli.display.progress import ProgressDisplay
from tidyfinder.ui.cli.display.propagation_result import PropagationResultDisplay
from tidyfinder.ui.cli.display.settings import SettingsDisplay

__all__ = ["ProfilesDisplay", "ProgressDisplay", "PropagationResultDisplay", "SettingsDisplay"]
