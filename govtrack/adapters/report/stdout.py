"""Stdout report adapter.

Implements ReportPort by printing project state to terminal with
human-readable formatting.
"""

import asyncio
import logging

from govtrack.core.models import ProcessResult, ProjectSnapshot
from govtrack.core.ports import ReportPort

logger = logging.getLogger(__name__)


class StdoutReportAdapter(ReportPort):
    """Prints processed projects to stdout with human-readable formatting."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout report adapter.

        Args:
            verbose: If True, include the project's action list in output.
        """
        self.verbose = verbose

    async def report(self, snapshot: ProjectSnapshot) -> None:
        """Report a processed project to stdout."""
        await asyncio.to_thread(print, self._format_project(snapshot, self.verbose))

    async def report_summary(self, result: ProcessResult) -> None:
        """Report a processing summary to stdout."""
        await asyncio.to_thread(print, self._format_summary(result))

    @staticmethod
    def _format_project(snapshot: ProjectSnapshot, verbose: bool) -> str:
        """Format a single project block."""
        lines = [
            "=" * 80,
            f"PROJECT: {snapshot.name}",
            "=" * 80,
            f"Department: {snapshot.department}",
            f"Funded: {'YES' if snapshot.funded else 'NO'}",
            f"Budget: {snapshot.budget:,.2f}",
            f"Completed: {'YES' if snapshot.completed else 'NO'}",
        ]

        if verbose and snapshot.actions:
            lines.append("")
            lines.append("ACTIONS:")
            for i, action in enumerate(snapshot.actions, 1):
                lines.append(f"  {i}. {action}")

        return "\n".join(lines)

    @staticmethod
    def _format_summary(result: ProcessResult) -> str:
        """Format a summary statistics report."""
        lines = [
            "=" * 80,
            "SUMMARY REPORT",
            "=" * 80,
            "",
            f"Projects Processed: {result.projects_processed}",
            f"Actions Applied: {result.actions_applied}",
            f"Funded: {result.funded_count}",
            f"Completed: {result.completed_count}",
            f"Total Budget: {result.total_budget:,.2f}",
            "",
            "=" * 80,
        ]
        return "\n".join(lines)
