"""Fake RegistryPort implementation for testing."""

from datetime import UTC, datetime

from govtrack.core.models import ProcessResult, Project, ProjectSnapshot
from govtrack.core.ports import RegistryPort


class FakeRegistryPort(RegistryPort):
    """In-memory registry port for testing.

    Records operations without applying any actions.
    """

    def __init__(self) -> None:
        """Initialize with empty operation tracking."""
        self.added_projects: list[Project] = []
        self.process_call_count = 0
        self.should_fail: bool = False
        self.fail_message: str = "Registry operation failed"

    async def add_project(self, project: Project) -> None:
        if self.should_fail:
            raise RuntimeError(self.fail_message)

        self.added_projects.append(project)

    async def process_all(self) -> ProcessResult:
        """Record the call and return a zeroed result."""
        if self.should_fail:
            raise RuntimeError(self.fail_message)

        self.process_call_count += 1
        return ProcessResult(
            projects_processed=len(self.added_projects),
            actions_applied=0,
            funded_count=0,
            completed_count=0,
            total_budget=0.0,
            timestamp=datetime.now(UTC),
        )

    async def get_project(self, name: str) -> ProjectSnapshot:
        if self.should_fail:
            raise RuntimeError(self.fail_message)

        for project in self.added_projects:
            if project.name == name:
                return project.snapshot()
        raise ValueError(f"Project {name} not found")

    async def list_projects(
        self, department: str | None = None
    ) -> list[ProjectSnapshot]:
        if self.should_fail:
            raise RuntimeError(self.fail_message)

        return [
            project.snapshot()
            for project in self.added_projects
            if department is None or project.department == department
        ]

    def set_should_fail(
        self, should_fail: bool, message: str = "Registry operation failed"
    ) -> None:
        """Configure the adapter to fail on the next operation."""
        self.should_fail = should_fail
        self.fail_message = message
