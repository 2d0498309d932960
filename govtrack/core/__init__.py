"""Core domain logic for the govtrack project registry.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .actions import (
    Action,
    AdjustBudget,
    ApproveFunding,
    BudgetFreeze,
    CompleteProject,
    ConditionalApproval,
    DepartmentTransfer,
)
from .models import ProcessResult, Project, ProjectSnapshot, ScenarioOutcome
from .registry import ProjectRegistry

__all__ = [
    "Action",
    "AdjustBudget",
    "ApproveFunding",
    "BudgetFreeze",
    "CompleteProject",
    "ConditionalApproval",
    "DepartmentTransfer",
    "ProcessResult",
    "Project",
    "ProjectRegistry",
    "ProjectSnapshot",
    "ScenarioOutcome",
]
