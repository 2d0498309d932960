"""Port interfaces for the govtrack project registry.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - ReportPort: Publish processed projects and run summaries

2. **Driving Ports** (adapters/external systems call into core)
   - RegistryPort: Add, process and inspect projects
"""

from abc import ABC, abstractmethod

from .models import ProcessResult, Project, ProjectSnapshot


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class ReportPort(ABC):
    """Port for publishing project state after processing.

    Adapters implementing this port write reports to an external medium
    (terminal, markdown files, etc.).
    """

    @abstractmethod
    async def report(self, snapshot: ProjectSnapshot) -> None:
        """Report the state of a single processed project.

        Args:
            snapshot: Project state captured after processing.

        Raises:
            Exception: If the report cannot be written.
                Callers should log and continue.
        """

    @abstractmethod
    async def report_summary(self, result: ProcessResult) -> None:
        """Report the summary of a processing run.

        Args:
            result: Aggregate counts for the run.

        Raises:
            Exception: If the summary cannot be written.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class RegistryPort(ABC):
    """Port for human-initiated registry operations.

    Called by the CLI to build up a registry and process it.
    """

    @abstractmethod
    async def add_project(self, project: Project) -> None:
        """Add a project to the end of the registry.

        Args:
            project: Fully constructed project, including its actions.
        """

    @abstractmethod
    async def process_all(self) -> ProcessResult:
        """Apply every project's actions, in insertion order.

        Returns:
            ProcessResult summarizing the run.
        """

    @abstractmethod
    async def get_project(self, name: str) -> ProjectSnapshot:
        """Retrieve the current state of a project by name.

        Args:
            name: Project name.

        Returns:
            ProjectSnapshot of the current state.

        Raises:
            ValueError: If no project has that name.
        """

    @abstractmethod
    async def list_projects(
        self, department: str | None = None
    ) -> list[ProjectSnapshot]:
        """List projects in insertion order, optionally filtered.

        Args:
            department: Only projects in this department. If None, return all.

        Returns:
            List of ProjectSnapshot objects. Empty list if none match.
        """
