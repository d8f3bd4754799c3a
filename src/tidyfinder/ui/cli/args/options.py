"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final

from tidyfinder.features.preferences import FinderOption, ViewStyle

ProfileAction = Literal["list", "save", "rename", "delete", "apply", "export", "import"]


@final
@dataclass(slots=True)
class SettingsArgs:
    """Command line arguments for ``show``, ``view``, ``option`` and ``relaunch``."""

    command: Literal["show", "view", "option", "relaunch"]
    quiet: bool
    view_style: ViewStyle | None = None
    option: FinderOption | None = None
    enabled: bool | None = None
    relaunch: bool = False


@final
@dataclass(slots=True)
class ResetArgs:
    """Command line arguments for the ``reset`` subcommand."""

    command: Literal["reset"]
    root: Path
    assume_yes: bool
    relaunch: bool
    quiet: bool
    profile: str | None = None
    profiles_file: Path | None = None


@final
@dataclass(slots=True)
class TemplateArgs:
    """Command line arguments for the ``template`` subcommand."""

    command: Literal["template"]
    template: Path
    targets: list[Path] = field(default_factory=list)
    relaunch: bool = False
    quiet: bool = False


@final
@dataclass(slots=True)
class ProfilesArgs:
    """Command line arguments for the ``profiles`` subcommand family."""

    command: Literal["profiles"]
    action: ProfileAction
    quiet: bool
    profiles_file: Path | None = None
    name: str | None = None
    new_name: str | None = None
    path: Path | None = None
    relaunch: bool = False


CLIArgs = SettingsArgs | ResetArgs | TemplateArgs | ProfilesArgs

__all__ = ["CLIArgs", "ProfileAction", "ProfilesArgs", "ResetArgs", "SettingsArgs", "TemplateArgs"]
