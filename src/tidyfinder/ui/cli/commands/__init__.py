"""Command execution package for CLI."""

from tidyfinder.ui.cli.commands.profiles import ProfilesCommand
from tidyfinder.ui.cli.commands.reset import ResetCommand
from tidyfinder.ui.cli.commands.settings import SettingsCommand
from tidyfinder.ui.cli.commands.template import TemplateCommand

__all__ = [
    "ProfilesCommand",
    "ResetCommand",
    "SettingsCommand",
    "TemplateCommand",
]
