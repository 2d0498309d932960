"""Fake ReportPort implementation for testing."""

from govtrack.core.models import ProcessResult, ProjectSnapshot
from govtrack.core.ports import ReportPort


class FakeReportPort(ReportPort):
    """In-memory report adapter for testing.

    Captures all reports sent through this port for test assertions.
    """

    def __init__(self):
        """Initialize with empty report history."""
        self.reported_projects: list[ProjectSnapshot] = []
        self.reported_summaries: list[ProcessResult] = []
        self.report_call_count = 0
        self.report_summary_call_count = 0
        self.should_fail: bool = False
        self.fail_message: str = "Report failed"

    async def report(self, snapshot: ProjectSnapshot) -> None:
        """Capture a project report."""
        self.report_call_count += 1

        if self.should_fail:
            raise RuntimeError(self.fail_message)

        self.reported_projects.append(snapshot)

    async def report_summary(self, result: ProcessResult) -> None:
        """Capture a summary report."""
        self.report_summary_call_count += 1

        if self.should_fail:
            raise RuntimeError(self.fail_message)

        self.reported_summaries.append(result)

    def get_last_summary_report(self) -> ProcessResult | None:
        """Get the most recent summary report, if any."""
        if self.reported_summaries:
            return self.reported_summaries[-1]
        return None

    def get_reported_names(self) -> list[str]:
        """Get the names of reported projects, in report order."""
        return [snapshot.name for snapshot in self.reported_projects]

    def set_should_fail(self, should_fail: bool, message: str = "Report failed") -> None:
        """Configure the adapter to fail on the next operation."""
        self.should_fail = should_fail
        self.fail_message = message

    def reset(self) -> None:
        """Reset all collected reports and state."""
        self.reported_projects.clear()
        self.reported_summaries.clear()
        self.report_call_count = 0
        self.report_summary_call_count = 0
        self.should_fail = False
        self.fail_message = "Report failed"
