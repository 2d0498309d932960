"""Tests for project actions.

Verifies each action variant's effect on a project, including the
silent no-op paths, and conversion of actions to and from dicts.
"""

import pytest

from govtrack.core.actions import (
    Action,
    AdjustBudget,
    ApproveFunding,
    BudgetFreeze,
    CompleteProject,
    ConditionalApproval,
    DepartmentTransfer,
    action_from_dict,
    action_to_dict,
)
from govtrack.core.models import Project


@pytest.fixture
def project() -> Project:
    """Create an unfunded project with no actions."""
    return Project(
        name="River Bridge",
        department="Transportation",
        funded=False,
        budget=1_000_000,
    )


# ============================================================================
# ApproveFunding
# ============================================================================


def test_approve_funding_sets_funded(project: Project) -> None:
    ApproveFunding().apply(project)
    assert project.funded is True


def test_approve_funding_is_idempotent(project: Project) -> None:
    ApproveFunding().apply(project)
    ApproveFunding().apply(project)
    assert project.funded is True
    assert project.budget == 1_000_000


# ============================================================================
# AdjustBudget
# ============================================================================


def test_adjust_budget_increase(project: Project) -> None:
    AdjustBudget(500_000).apply(project)
    assert project.budget == 1_500_000


def test_adjust_budget_decrease() -> None:
    schools = Project("School Upgrade", "Education", True, 800_000)
    AdjustBudget(-200_000).apply(schools)
    assert schools.budget == 600_000


def test_adjust_budget_can_go_negative(project: Project) -> None:
    """Budgets have no floor."""
    AdjustBudget(-1_250_000).apply(project)
    assert project.budget == -250_000


def test_adjust_budget_fractional(project: Project) -> None:
    AdjustBudget(0.5).apply(project)
    assert project.budget == pytest.approx(1_000_000.5)


# ============================================================================
# CompleteProject
# ============================================================================


def test_complete_funded_project() -> None:
    hospital = Project("City Hospital", "Health", True, 2_000_000)
    CompleteProject().apply(hospital)
    assert hospital.completed is True


def test_complete_unfunded_project_is_noop(project: Project) -> None:
    CompleteProject().apply(project)
    assert project.completed is False
    assert project.funded is False


def test_approve_then_complete(project: Project) -> None:
    ApproveFunding().apply(project)
    CompleteProject().apply(project)
    assert project.funded is True
    assert project.completed is True


# ============================================================================
# ConditionalApproval
# ============================================================================


def test_conditional_approval_above_threshold() -> None:
    highway = Project("Highway Expansion", "Transportation", False, 1_200_000)
    ConditionalApproval(ApproveFunding(), 1_000_000).apply(highway)
    assert highway.funded is True


def test_conditional_approval_below_threshold() -> None:
    airport = Project("Airport Renovation", "Transportation", False, 3_000_000)
    ConditionalApproval(ApproveFunding(), 5_000_000).apply(airport)
    assert airport.funded is False


def test_conditional_approval_threshold_is_inclusive(project: Project) -> None:
    ConditionalApproval(ApproveFunding(), 1_000_000).apply(project)
    assert project.funded is True


def test_conditional_approval_wraps_any_action(project: Project) -> None:
    ConditionalApproval(BudgetFreeze(), 500_000).apply(project)
    assert project.budget == 0


def test_nested_conditional_approval(project: Project) -> None:
    """Both thresholds must be met for the innermost action to run."""
    nested = ConditionalApproval(
        ConditionalApproval(DepartmentTransfer("Urban Development"), 2_000_000),
        500_000,
    )
    nested.apply(project)
    assert project.department == "Transportation"

    project.set_budget(2_000_000)
    nested.apply(project)
    assert project.department == "Urban Development"


# ============================================================================
# DepartmentTransfer and BudgetFreeze
# ============================================================================


def test_department_transfer_overwrites(project: Project) -> None:
    DepartmentTransfer("Urban Development").apply(project)
    assert project.department == "Urban Development"


def test_department_transfer_accepts_empty_name(project: Project) -> None:
    DepartmentTransfer("").apply(project)
    assert project.department == ""


@pytest.mark.parametrize("budget", [3_000_000, 0, -42.5])
def test_budget_freeze_always_zero(budget: float) -> None:
    museum = Project("National Museum", "Culture", True, budget)
    BudgetFreeze().apply(museum)
    assert museum.budget == 0


# ============================================================================
# describe
# ============================================================================


def test_describe_conditional_includes_inner_action() -> None:
    description = ConditionalApproval(ApproveFunding(), 1_000_000).describe()
    assert "approve funding" in description
    assert "1,000,000.00" in description


def test_action_is_abstract() -> None:
    with pytest.raises(TypeError):
        Action()  # type: ignore[abstract]


# ============================================================================
# dict conversion
# ============================================================================


def test_action_dict_round_trip_nested() -> None:
    action = ConditionalApproval(
        ConditionalApproval(AdjustBudget(-200_000), 100.0),
        1_000_000,
    )
    assert action_from_dict(action_to_dict(action)) == action


def test_action_to_dict_shape() -> None:
    assert action_to_dict(DepartmentTransfer("Health")) == {
        "type": "department_transfer",
        "new_department": "Health",
    }


def test_action_from_dict_coerces_amount() -> None:
    action = action_from_dict({"type": "adjust_budget", "amount": "250"})
    assert action == AdjustBudget(250.0)


def test_action_from_dict_unknown_type() -> None:
    with pytest.raises(ValueError, match="Unknown action type: demolish"):
        action_from_dict({"type": "demolish"})


def test_action_from_dict_missing_parameter() -> None:
    with pytest.raises(ValueError, match="Missing parameter"):
        action_from_dict({"type": "adjust_budget"})


def test_action_from_dict_invalid_amount() -> None:
    with pytest.raises(ValueError, match="Invalid parameter"):
        action_from_dict({"type": "adjust_budget", "amount": "lots"})


def test_action_from_dict_rejects_non_dict() -> None:
    with pytest.raises(ValueError, match="Action must be an object"):
        action_from_dict(["approve_funding"])  # type: ignore[arg-type]


def test_action_to_dict_unknown_action() -> None:
    class Demolish(Action):
        def apply(self, project: Project) -> None:
            pass

        def describe(self) -> str:
            return "demolish"

    with pytest.raises(ValueError, match="Unknown action type: Demolish"):
        action_to_dict(Demolish())


@pytest.mark.parametrize("new_department", [None, 42])
def test_action_from_dict_department_must_be_string(new_department: object) -> None:
    with pytest.raises(ValueError, match="new_department must be a string"):
        action_from_dict({"type": "department_transfer", "new_department": new_department})
