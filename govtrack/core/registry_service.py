"""Registry service: implements RegistryPort on top of ProjectRegistry.

This is a core service that owns a registry, processes it on request,
summarizes the outcome and publishes each processed project through the
report port. All state changes are logged.
"""

import logging
from datetime import UTC, datetime

from .models import ProcessResult, Project, ProjectSnapshot
from .ports import RegistryPort, ReportPort
from .registry import ProjectRegistry

logger = logging.getLogger(__name__)


class RegistryService(RegistryPort):
    """Core implementation of RegistryPort.

    Report failures are logged and never undo processing: by the time a
    report is attempted, the projects have already been mutated.
    """

    def __init__(
        self,
        report: ReportPort,
        registry: ProjectRegistry | None = None,
    ):
        """Initialize the registry service.

        Args:
            report: ReportPort implementation for publishing results.
            registry: Registry to operate on. A fresh one is created if omitted.
        """
        self.report = report
        self.registry = registry if registry is not None else ProjectRegistry()

    async def add_project(self, project: Project) -> None:
        """Add a project to the end of the registry."""
        self.registry.add_project(project)

        logger.info(
            f"Project {project.name} added",
            extra={
                "project": project.name,
                "department": project.department,
                "actions": len(project.actions),
            },
        )

    async def process_all(self) -> ProcessResult:
        """Process every project and report the results.

        Returns:
            ProcessResult with counts taken after processing.
        """
        applied = self.registry.process_all()
        projects = self.registry.projects

        result = ProcessResult(
            projects_processed=len(projects),
            actions_applied=applied,
            funded_count=sum(1 for p in projects if p.funded),
            completed_count=sum(1 for p in projects if p.completed),
            total_budget=sum(p.budget for p in projects),
            timestamp=datetime.now(UTC),
        )

        logger.info(
            f"Processed {result.projects_processed} projects",
            extra={
                "actions_applied": result.actions_applied,
                "funded": result.funded_count,
                "completed": result.completed_count,
            },
        )

        for project in projects:
            try:
                await self.report.report(project.snapshot())
            except Exception as e:
                logger.error(
                    f"Failed to report project {project.name}: {e}",
                    exc_info=True,
                )

        try:
            await self.report.report_summary(result)
        except Exception as e:
            logger.error(f"Failed to report processing summary: {e}", exc_info=True)

        return result

    async def get_project(self, name: str) -> ProjectSnapshot:
        """Retrieve the current state of a project by name.

        Raises:
            ValueError: If no project has that name.
        """
        project = self.registry.get(name)
        if project is None:
            raise ValueError(f"Project {name} not found")

        logger.debug(f"Retrieved project {name}", extra={"project": name})
        return project.snapshot()

    async def list_projects(
        self, department: str | None = None
    ) -> list[ProjectSnapshot]:
        """List projects, optionally filtered by department."""
        snapshots = [
            project.snapshot()
            for project in self.registry
            if department is None or project.department == department
        ]

        logger.debug(
            "Listed projects" + (f" in department={department}" if department else ""),
            extra={"count": len(snapshots)},
        )

        return snapshots
