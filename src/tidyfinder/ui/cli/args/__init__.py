"""Command line argument handling package."""

from tidyfinder.ui.cli.args.parser import ArgumentParser
from tidyfinder.ui.cli.args.options import (
    CLIArgs,
    ProfilesArgs,
    ResetArgs,
    SettingsArgs,
    TemplateArgs,
)

__all__ = ["ArgumentParser", "CLIArgs", "ProfilesArgs", "ResetArgs", "SettingsArgs", "TemplateArgs"]
