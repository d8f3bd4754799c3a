"""Template command implementation for the CLI."""

from __future__ import annotations

from typing import final

from tidyfinder.application.services.finder_settings_service import FinderSettingsService
from tidyfinder.application.services.propagation_service import (
    PropagationReport,
    PropagationRequest,
    TemplatePropagationService,
)
from tidyfinder.platform.logging import logger
from tidyfinder.ui.cli.args.options import TemplateArgs
from tidyfinder.ui.cli.display.progress import ProgressDisplay
from tidyfinder.ui.cli.display.propagation_result import PropagationResultDisplay


@final
class TemplateCommand:
    """Copy a template folder's view settings into each target folder."""

    def __init__(
        self,
        args: TemplateArgs,
        *,
        service: TemplatePropagationService | None = None,
        settings_service: FinderSettingsService | None = None,
        progress: ProgressDisplay | None = None,
        display: PropagationResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.service = service or TemplatePropagationService(logger=logger)
        self._settings_service = settings_service
        self.progress = progress or ProgressDisplay()
        self.display = display or PropagationResultDisplay()

    def execute(self) -> PropagationReport:
        """Execute the template command."""

        request = PropagationRequest(template=self.args.template, targets=list(self.args.targets))
        report = self.progress.run_with_service(self.service, request)
        self.display.show_results(report, quiet=self.args.quiet)

        # Finder only picks up rewritten folders after a relaunch.
        if self.args.relaunch and report.copied_count:
            settings_service = self._settings_service or FinderSettingsService()
            settings_service.relaunch()
        return report
