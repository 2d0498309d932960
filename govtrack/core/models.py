"""Domain models for the govtrack project registry.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .actions import Action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectSnapshot:
    """Read-only view of a project's state at a point in time."""

    name: str
    department: str
    funded: bool
    budget: float
    completed: bool
    actions: tuple[str, ...]  # action descriptions, in application order


@dataclass
class Project:
    """A government-funded initiative and the actions queued against it.

    The project exclusively owns its actions. State changes only through
    the setters, which actions call when applied.

    Note: No validation is performed on any field. Budgets may go negative
    and department names may be empty.
    """

    name: str
    department: str
    funded: bool
    budget: float
    actions: list["Action"] = field(default_factory=list)
    completed: bool = field(default=False)

    def set_funded(self, funded: bool) -> None:
        self.funded = funded

    def set_budget(self, amount: float) -> None:
        self.budget = amount

    def set_completed(self, completed: bool) -> None:
        self.completed = completed

    def set_department(self, department: str) -> None:
        self.department = department

    def process(self) -> int:
        """Apply every owned action to this project, in insertion order.

        Calling process again re-applies all actions, so budget
        adjustments compound across calls.

        Returns:
            Number of actions applied (no-op actions included).
        """
        for action in self.actions:
            action.apply(self)
            logger.debug(
                f"Applied {action.describe()} to {self.name}",
                extra={"project": self.name, "budget": self.budget},
            )
        return len(self.actions)

    def snapshot(self) -> ProjectSnapshot:
        """Capture the current state as an immutable ProjectSnapshot."""
        return ProjectSnapshot(
            name=self.name,
            department=self.department,
            funded=self.funded,
            budget=self.budget,
            completed=self.completed,
            actions=tuple(action.describe() for action in self.actions),
        )


@dataclass(frozen=True)
class ProcessResult:
    """Summary of a registry processing run."""

    projects_processed: int
    actions_applied: int
    funded_count: int
    completed_count: int
    total_budget: float
    timestamp: datetime


@dataclass(frozen=True)
class ScenarioOutcome:
    """Result of running one named scenario."""

    name: str
    passed: bool
    failures: tuple[str, ...] = ()  # failed expectations, empty when passed
    snapshot: ProjectSnapshot | None = None  # project state after processing
