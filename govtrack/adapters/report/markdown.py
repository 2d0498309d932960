"""Markdown file report adapter.

Implements ReportPort by writing one markdown file per processed project,
organized in date-based directories (YYYY-MM-DD). Useful for keeping an
audit trail of registry runs.
"""

import asyncio
import logging
import re
from datetime import UTC, datetime
from pathlib import Path

from govtrack.core.models import ProcessResult, ProjectSnapshot
from govtrack.core.ports import ReportPort

logger = logging.getLogger(__name__)


class MarkdownReportAdapter(ReportPort):
    """Writes project reports to markdown files organized by date."""

    def __init__(self, report_dir: str):
        """Initialize markdown report adapter.

        Args:
            report_dir: Base directory where date subdirectories are created.
                       The run summary is written to report_dir/summary.md.

        Raises:
            ValueError: If report_dir is a filesystem root.
            OSError: If the base directory cannot be created.
        """
        self.base_dir = Path(report_dir).resolve()

        if self.base_dir.parent == self.base_dir:
            raise ValueError(f"report_dir cannot be a filesystem root: {report_dir}")

        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OSError(f"Failed to create base directory {report_dir}: {e}") from e
        self._lock = asyncio.Lock()

    @staticmethod
    def _sanitize_filename(text: str) -> str:
        """Replace anything but word characters and hyphens, max 100 chars.

        Examples:
            >>> MarkdownReportAdapter._sanitize_filename("River Bridge")
            'River_Bridge'
        """
        sanitized = re.sub(r"[^\w\-]", "_", text)
        return sanitized[:100] or "unnamed"

    def _get_report_file_path(self, snapshot: ProjectSnapshot, now: datetime) -> Path:
        """Compute the report path without touching the filesystem."""
        date_dir = self.base_dir / now.strftime("%Y-%m-%d")
        filename = f"{now.strftime('%H-%M-%S')}_{self._sanitize_filename(snapshot.name)}.md"
        return date_dir / filename

    @staticmethod
    def _claim_free_path(path: Path) -> Path:
        """Create the date directory and return the first path not yet taken.

        Reports for projects whose names sanitize to the same string in the
        same second get a numeric suffix (_2, _3, ...) instead of overwriting.
        Must be called with the adapter lock held.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        candidate = path
        suffix = 2
        while candidate.exists():
            candidate = path.with_name(f"{path.stem}_{suffix}{path.suffix}")
            suffix += 1
        return candidate

    async def report(self, snapshot: ProjectSnapshot) -> None:
        """Write a processed project to its own markdown file."""
        entry = self._format_project(snapshot)
        report_file = self._get_report_file_path(snapshot, datetime.now(UTC))

        async with self._lock:
            try:
                report_file = await asyncio.to_thread(self._claim_free_path, report_file)
                await asyncio.to_thread(report_file.write_text, entry, encoding="utf-8")

                logger.info(
                    f"Wrote project report to {report_file}",
                    extra={"project": snapshot.name},
                )

            except OSError as e:
                logger.error(
                    f"Failed to write markdown report: {e}",
                    extra={"path": str(report_file)},
                    exc_info=True,
                )
                raise

    async def report_summary(self, result: ProcessResult) -> None:
        """Write the processing summary to summary.md.

        Raises:
            OSError: If the file cannot be written.
        """
        summary = self._format_summary(result)
        summary_file = self.base_dir / "summary.md"

        async with self._lock:
            try:
                await asyncio.to_thread(summary_file.write_text, summary, encoding="utf-8")

                logger.info(f"Wrote summary report to {summary_file}")

            except OSError as e:
                logger.error(
                    f"Failed to write markdown summary: {e}",
                    extra={"path": str(summary_file)},
                    exc_info=True,
                )
                raise

    @staticmethod
    def _format_project(snapshot: ProjectSnapshot) -> str:
        lines = [
            f"# {snapshot.name}",
            "",
            f"- **Department**: {snapshot.department}",
            f"- **Funded**: {'yes' if snapshot.funded else 'no'}",
            f"- **Budget**: {snapshot.budget:,.2f}",
            f"- **Completed**: {'yes' if snapshot.completed else 'no'}",
            "",
            "## Actions",
            "",
        ]
        if snapshot.actions:
            lines.extend(f"{i}. {action}" for i, action in enumerate(snapshot.actions, 1))
        else:
            lines.append("_None_")
        lines.append("")
        return "\n".join(lines)

    @staticmethod
    def _format_summary(result: ProcessResult) -> str:
        lines = [
            "# Processing Summary",
            "",
            f"_Generated {result.timestamp.isoformat()}_",
            "",
            "| Metric | Value |",
            "|---|---|",
            f"| Projects processed | {result.projects_processed} |",
            f"| Actions applied | {result.actions_applied} |",
            f"| Funded | {result.funded_count} |",
            f"| Completed | {result.completed_count} |",
            f"| Total budget | {result.total_budget:,.2f} |",
            "",
        ]
        return "\n".join(lines)
