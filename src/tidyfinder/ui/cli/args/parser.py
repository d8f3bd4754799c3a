"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tidyfinder.config.config import Config
from tidyfinder.features.preferences import FinderOption, ViewStyle
from tidyfinder.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from tidyfinder.ui.cli.args.options import (
    CLIArgs,
    ProfilesArgs,
    ResetArgs,
    SettingsArgs,
    TemplateArgs,
)

_SWITCH_VALUES: dict[str, bool] = {
    "on": True,
    "off": False,
    "true": True,
    "false": False,
    "yes": True,
    "no": False,
    "1": True,
    "0": False,
}


def _view_style(value: str) -> ViewStyle:
    try:
        return ViewStyle.from_user_input(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _finder_option(value: str) -> FinderOption:
    try:
        return FinderOption.from_user_input(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _switch(value: str) -> bool:
    try:
        return _SWITCH_VALUES[value.strip().casefold()]
    except KeyError:
        raise argparse.ArgumentTypeError(f"Expected 'on' or 'off', got '{value}'") from None


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        # Verbosity flags are accepted before or after the subcommand.
        verbosity = argparse.ArgumentParser(add_help=False)
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            default=argparse.SUPPRESS,
            help="Show detailed logging output",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            default=argparse.SUPPRESS,
            help="Suppress all output except errors",
        )

        parser = argparse.ArgumentParser(
            prog="tidyfinder",
            description="TidyFinder - manage Finder view preferences, profiles and folder view templates.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            parents=[verbosity],
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        _ = subparsers.add_parser(
            "show",
            parents=[verbosity],
            help="Show the current Finder settings",
        )

        view_parser = subparsers.add_parser(
            "view",
            parents=[verbosity],
            help="Set the default Finder view style",
        )
        _ = view_parser.add_argument(
            "style",
            type=_view_style,
            metavar="STYLE",
            help="One of list, icon, column, gallery",
        )
        ArgumentParser._add_relaunch_flag(view_parser)

        option_parser = subparsers.add_parser(
            "option",
            parents=[verbosity],
            help="Turn a Finder window option on or off",
        )
        _ = option_parser.add_argument(
            "option",
            type=_finder_option,
            metavar="OPTION",
            help="One of pathbar, statusbar, sidebar, preview",
        )
        _ = option_parser.add_argument(
            "state",
            type=_switch,
            metavar="on|off",
            help="Whether the option should be shown",
        )
        ArgumentParser._add_relaunch_flag(option_parser)

        _ = subparsers.add_parser(
            "relaunch",
            parents=[verbosity],
            help="Relaunch Finder so written preferences take effect",
        )

        reset_parser = subparsers.add_parser(
            "reset",
            parents=[verbosity],
            help="Remove saved view settings from every folder below a root",
        )
        _ = reset_parser.add_argument(
            "--root",
            type=str,
            metavar="PATH",
            help="Folder to reset recursively (defaults to the configured root or home)",
        )
        _ = reset_parser.add_argument(
            "--yes",
            action="store_true",
            help="Do not ask for confirmation",
        )
        _ = reset_parser.add_argument(
            "--profile",
            metavar="NAME",
            help="Apply a saved profile first so every folder falls back to its settings",
        )
        ArgumentParser._add_relaunch_flag(reset_parser)

        template_parser = subparsers.add_parser(
            "template",
            parents=[verbosity],
            help="Copy a template folder's view settings to other folders",
        )
        _ = template_parser.add_argument(
            "template",
            type=str,
            metavar="TEMPLATE",
            help="Folder whose view settings are copied",
        )
        _ = template_parser.add_argument(
            "targets",
            type=str,
            nargs="+",
            metavar="TARGET",
            help="Folders that receive the template's view settings",
        )
        ArgumentParser._add_relaunch_flag(template_parser)

        profiles_parser = subparsers.add_parser(
            "profiles",
            parents=[verbosity],
            help="Manage saved Finder settings profiles",
        )
        _ = profiles_parser.add_argument(
            "--file",
            dest="profiles_file",
            type=str,
            metavar="PATH",
            help="Profiles file to use instead of the configured one",
        )
        ArgumentParser._configure_profiles_parser(profiles_parser, verbosity)

        return parser

    @staticmethod
    def _add_relaunch_flag(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--relaunch",
            action="store_true",
            help="Relaunch Finder afterwards",
        )

    @staticmethod
    def _configure_profiles_parser(
        parser: argparse.ArgumentParser,
        verbosity: argparse.ArgumentParser,
    ) -> None:
        actions = parser.add_subparsers(dest="action", required=True)

        _ = actions.add_parser("list", parents=[verbosity], help="List saved profiles")

        save_parser = actions.add_parser(
            "save", parents=[verbosity], help="Save the current Finder settings as a profile"
        )
        _ = save_parser.add_argument("name", metavar="NAME")

        rename_parser = actions.add_parser("rename", parents=[verbosity], help="Rename a profile")
        _ = rename_parser.add_argument("name", metavar="OLD")
        _ = rename_parser.add_argument("new_name", metavar="NEW")

        delete_parser = actions.add_parser("delete", parents=[verbosity], help="Delete a profile")
        _ = delete_parser.add_argument("name", metavar="NAME")

        apply_parser = actions.add_parser(
            "apply", parents=[verbosity], help="Write a profile's settings to Finder"
        )
        _ = apply_parser.add_argument("name", metavar="NAME")
        ArgumentParser._add_relaunch_flag(apply_parser)

        export_parser = actions.add_parser(
            "export", parents=[verbosity], help="Write a profile to a JSON file"
        )
        _ = export_parser.add_argument("name", metavar="NAME")
        _ = export_parser.add_argument("path", metavar="PATH")

        import_parser = actions.add_parser(
            "import", parents=[verbosity], help="Add a profile from a JSON file"
        )
        _ = import_parser.add_argument("path", metavar="PATH")

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            Args: Processed command line arguments.

        Raises:
            SystemExit: If required paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command in {"show", "view", "option", "relaunch"}:
            return ArgumentParser._process_settings(parsed_args, configuration, quiet=is_quiet)

        if command == "reset":
            return ArgumentParser._process_reset(parsed_args, configuration, quiet=is_quiet)

        if command == "template":
            return ArgumentParser._process_template(parsed_args, configuration, quiet=is_quiet)

        if command == "profiles":
            return ArgumentParser._process_profiles(parsed_args, configuration, quiet=is_quiet)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_settings(
        parsed_args: argparse.Namespace,
        configuration: Config,
        *,
        quiet: bool,
    ) -> SettingsArgs:
        relaunch = bool(getattr(parsed_args, "relaunch", False))
        if parsed_args.command in {"view", "option"}:
            relaunch = relaunch or configuration.relaunch_after_apply

        return SettingsArgs(
            command=parsed_args.command,
            quiet=quiet,
            view_style=getattr(parsed_args, "style", None),
            option=getattr(parsed_args, "option", None),
            enabled=getattr(parsed_args, "state", None),
            relaunch=relaunch,
        )

    @staticmethod
    def _process_reset(
        parsed_args: argparse.Namespace,
        configuration: Config,
        *,
        quiet: bool,
    ) -> ResetArgs:
        if parsed_args.root:
            root = Path(parsed_args.root).expanduser()
        else:
            root = configuration.reset_root or Path.home()

        if not root.is_dir():
            logger.error("Reset root does not exist or is not a directory: %s", root)
            sys.exit(1)

        return ResetArgs(
            command="reset",
            root=root.resolve(),
            assume_yes=parsed_args.yes,
            relaunch=parsed_args.relaunch or configuration.relaunch_after_apply,
            quiet=quiet,
            profile=parsed_args.profile,
            profiles_file=configuration.profiles_file,
        )

    @staticmethod
    def _process_template(
        parsed_args: argparse.Namespace,
        configuration: Config,
        *,
        quiet: bool,
    ) -> TemplateArgs:
        return TemplateArgs(
            command="template",
            template=Path(parsed_args.template).expanduser(),
            targets=[Path(target).expanduser() for target in parsed_args.targets],
            relaunch=parsed_args.relaunch or configuration.relaunch_after_apply,
            quiet=quiet,
        )

    @staticmethod
    def _process_profiles(
        parsed_args: argparse.Namespace,
        configuration: Config,
        *,
        quiet: bool,
    ) -> ProfilesArgs:
        profiles_file = (
            Path(parsed_args.profiles_file).expanduser()
            if parsed_args.profiles_file
            else configuration.profiles_file
        )
        path = getattr(parsed_args, "path", None)
        relaunch = bool(getattr(parsed_args, "relaunch", False))
        if parsed_args.action == "apply":
            relaunch = relaunch or configuration.relaunch_after_apply

        return ProfilesArgs(
            command="profiles",
            action=parsed_args.action,
            quiet=quiet,
            profiles_file=profiles_file,
            name=getattr(parsed_args, "name", None),
            new_name=getattr(parsed_args, "new_name", None),
            path=Path(path).expanduser() if path else None,
            relaunch=relaunch,
        )
