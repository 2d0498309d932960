"""Project actions.

Each action transforms exactly one project when applied. Actions never
fail: a condition that is not met turns the action into a silent no-op.

Actions can also be converted to and from plain dicts, which is how the
CLI accepts them as JSON:

    {"type": "conditional_approval", "min_budget": 1000000,
     "action": {"type": "approve_funding"}}
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from .models import Project


class Action(ABC):
    """A single state-transforming operation applicable to a project."""

    @abstractmethod
    def apply(self, project: Project) -> None:
        """Apply this action to the project in place."""

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable description used in logs and reports."""


@dataclass(frozen=True)
class ApproveFunding(Action):
    """Mark the project as funded. Idempotent."""

    def apply(self, project: Project) -> None:
        project.set_funded(True)

    def describe(self) -> str:
        return "approve funding"


@dataclass(frozen=True)
class AdjustBudget(Action):
    """Add a (possibly negative) amount to the budget. No floor."""

    amount: float

    def apply(self, project: Project) -> None:
        project.set_budget(project.budget + self.amount)

    def describe(self) -> str:
        return f"adjust budget by {self.amount:+,.2f}"


@dataclass(frozen=True)
class CompleteProject(Action):
    """Mark the project completed, only if it is funded."""

    def apply(self, project: Project) -> None:
        if project.funded:
            project.set_completed(True)

    def describe(self) -> str:
        return "complete project"


@dataclass(frozen=True)
class ConditionalApproval(Action):
    """Apply the inner action only when budget >= min_budget."""

    action: Action
    min_budget: float

    def apply(self, project: Project) -> None:
        if project.budget >= self.min_budget:
            self.action.apply(project)

    def describe(self) -> str:
        return f"{self.action.describe()} if budget >= {self.min_budget:,.2f}"


@dataclass(frozen=True)
class DepartmentTransfer(Action):
    """Move the project to another department."""

    new_department: str

    def apply(self, project: Project) -> None:
        project.set_department(self.new_department)

    def describe(self) -> str:
        return f"transfer to {self.new_department}"


@dataclass(frozen=True)
class BudgetFreeze(Action):
    """Reset the budget to zero."""

    def apply(self, project: Project) -> None:
        project.set_budget(0)

    def describe(self) -> str:
        return "freeze budget"


def action_to_dict(action: Action) -> dict[str, Any]:
    """Convert an action to a plain dict.

    Raises:
        ValueError: If the action type is not known.
    """
    if isinstance(action, ApproveFunding):
        return {"type": "approve_funding"}
    if isinstance(action, AdjustBudget):
        return {"type": "adjust_budget", "amount": action.amount}
    if isinstance(action, CompleteProject):
        return {"type": "complete_project"}
    if isinstance(action, ConditionalApproval):
        return {
            "type": "conditional_approval",
            "action": action_to_dict(action.action),
            "min_budget": action.min_budget,
        }
    if isinstance(action, DepartmentTransfer):
        return {"type": "department_transfer", "new_department": action.new_department}
    if isinstance(action, BudgetFreeze):
        return {"type": "budget_freeze"}
    raise ValueError(f"Unknown action type: {type(action).__name__}")


def action_from_dict(data: dict[str, Any]) -> Action:
    """Build an action from a plain dict produced by action_to_dict.

    Args:
        data: Dict with a "type" key and the variant's parameters.

    Returns:
        The constructed action.

    Raises:
        ValueError: If the type is unknown or a parameter is missing.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Action must be an object, got {type(data).__name__}")

    action_type = data.get("type")
    try:
        if action_type == "approve_funding":
            return ApproveFunding()
        if action_type == "adjust_budget":
            return AdjustBudget(amount=float(data["amount"]))
        if action_type == "complete_project":
            return CompleteProject()
        if action_type == "conditional_approval":
            return ConditionalApproval(
                action=action_from_dict(data["action"]),
                min_budget=float(data["min_budget"]),
            )
        if action_type == "department_transfer":
            new_department = data["new_department"]
            if not isinstance(new_department, str):
                raise ValueError("new_department must be a string")
            return DepartmentTransfer(new_department=new_department)
        if action_type == "budget_freeze":
            return BudgetFreeze()
    except KeyError as e:
        raise ValueError(f"Missing parameter {e} for action {action_type}") from e
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid parameter for action {action_type}: {e}") from e

    raise ValueError(f"Unknown action type: {action_type}")
