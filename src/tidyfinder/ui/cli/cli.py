"""Command line interface for TidyFinder."""

import sys
from typing import final

from tidyfinder.application.services.propagation_service import (
    NoTargetsError,
    RunInProgressError,
)
from tidyfinder.features.profiles import ProfileError
from tidyfinder.features.propagation import MissingMetadataError
from tidyfinder.platform.logging import logger
from tidyfinder.platform.shell import CommandError
from tidyfinder.ui.cli.args import ArgumentParser
from tidyfinder.ui.cli.args.options import (
    CLIArgs,
    ProfilesArgs,
    ResetArgs,
    SettingsArgs,
    TemplateArgs,
)
from tidyfinder.ui.cli.commands import (
    ProfilesCommand,
    ResetCommand,
    SettingsCommand,
    TemplateCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Exit codes: 1 when any folder or command failed, 2 when the template
        folder has no view settings, 130 when interrupted.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, TemplateArgs):
                report = TemplateCommand(args).execute()
                if report.failures:
                    sys.exit(1)
                return

            if isinstance(args, ResetArgs):
                reset_report = ResetCommand(args).execute()
                if reset_report is not None and reset_report.failures:
                    sys.exit(1)
                return

            if isinstance(args, ProfilesArgs):
                ProfilesCommand(args).execute()
                return

            assert isinstance(args, SettingsArgs)
            SettingsCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except (MissingMetadataError, NoTargetsError) as e:
            logger.error("%s", e)
            sys.exit(2)
        except (CommandError, ProfileError, RunInProgressError) as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0


if __name__ == "__main__":
    sys.exit(main())
