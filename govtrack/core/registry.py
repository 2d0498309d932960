"""Ordered collection of projects processed as a batch."""

import logging
from collections.abc import Iterator

from .models import Project

logger = logging.getLogger(__name__)


class ProjectRegistry:
    """Holds projects in insertion order and processes them in bulk.

    Each project is processed independently; no action reaches across
    projects.
    """

    def __init__(self) -> None:
        self._projects: list[Project] = []

    def add_project(self, project: Project) -> None:
        self._projects.append(project)

    def process_all(self) -> int:
        """Process every project in insertion order.

        Returns:
            Total number of actions applied across all projects.
        """
        applied = 0
        for project in self._projects:
            applied += project.process()

        logger.debug(
            f"Processed {len(self._projects)} projects",
            extra={"projects": len(self._projects), "actions_applied": applied},
        )
        return applied

    def get(self, name: str) -> Project | None:
        """Return the first project with the given name, or None."""
        for project in self._projects:
            if project.name == name:
                return project
        return None

    @property
    def projects(self) -> tuple[Project, ...]:
        return tuple(self._projects)

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(self._projects)
