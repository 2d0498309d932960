"""Named registry scenarios.

Each scenario builds a fresh registry, processes it and checks the
resulting project state. Failed expectations are collected into a
ScenarioOutcome rather than raised, so every scenario always runs.
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from .actions import (
    AdjustBudget,
    ApproveFunding,
    BudgetFreeze,
    CompleteProject,
    ConditionalApproval,
    DepartmentTransfer,
)
from .models import ProcessResult, Project, ScenarioOutcome
from .ports import ReportPort
from .registry import ProjectRegistry

logger = logging.getLogger(__name__)


def _process(project: Project) -> Project:
    registry = ProjectRegistry()
    registry.add_project(project)
    registry.process_all()
    return project


def _expect(failures: list[str], label: str, actual: Any, expected: Any) -> None:
    if actual != expected:
        failures.append(f"{label}: expected {expected!r}, got {actual!r}")


def infrastructure_project_approval() -> tuple[Project, list[str]]:
    failures: list[str] = []
    bridge = _process(
        Project(
            "River Bridge", "Transportation", False, 1_000_000,
            [ApproveFunding(), AdjustBudget(500_000)],
        )
    )
    _expect(failures, "funded", bridge.funded, True)
    _expect(failures, "budget", bridge.budget, 1_500_000)
    return bridge, failures


def education_budget_cut() -> tuple[Project, list[str]]:
    failures: list[str] = []
    schools = _process(
        Project("School Upgrade", "Education", True, 800_000, [AdjustBudget(-200_000)])
    )
    _expect(failures, "budget", schools.budget, 600_000)
    return schools, failures


def project_completion_workflow() -> tuple[Project, list[str]]:
    failures: list[str] = []
    hospital = _process(
        Project("City Hospital", "Health", True, 2_000_000, [CompleteProject()])
    )
    _expect(failures, "completed", hospital.completed, True)
    return hospital, failures


def conditional_budget_approval() -> tuple[Project, list[str]]:
    failures: list[str] = []
    highway = _process(
        Project(
            "Highway Expansion", "Transportation", False, 1_200_000,
            [ConditionalApproval(ApproveFunding(), 1_000_000)],
        )
    )
    _expect(failures, "funded", highway.funded, True)
    return highway, failures


def insufficient_budget_rejection() -> tuple[Project, list[str]]:
    failures: list[str] = []
    airport = _process(
        Project(
            "Airport Renovation", "Transportation", False, 3_000_000,
            [ConditionalApproval(ApproveFunding(), 5_000_000)],
        )
    )
    _expect(failures, "funded", airport.funded, False)
    return airport, failures


def multi_action_project() -> tuple[Project, list[str]]:
    failures: list[str] = []
    library = _process(
        Project(
            "Central Library", "Culture", False, 1_250_000,
            [ApproveFunding(), AdjustBudget(750_000), CompleteProject()],
        )
    )
    _expect(failures, "funded", library.funded, True)
    _expect(failures, "budget", library.budget, 2_000_000)
    _expect(failures, "completed", library.completed, True)
    return library, failures


def department_transfer() -> tuple[Project, list[str]]:
    failures: list[str] = []
    park = _process(
        Project(
            "City Park", "Environment", True, 500_000,
            [DepartmentTransfer("Urban Development")],
        )
    )
    _expect(failures, "department", park.department, "Urban Development")
    return park, failures


def budget_freeze_action() -> tuple[Project, list[str]]:
    failures: list[str] = []
    museum = _process(
        Project("National Museum", "Culture", True, 3_000_000, [BudgetFreeze()])
    )
    _expect(failures, "budget", museum.budget, 0)
    return museum, failures


SCENARIOS: dict[str, Callable[[], tuple[Project, list[str]]]] = {
    "InfrastructureProjectApproval": infrastructure_project_approval,
    "EducationBudgetCut": education_budget_cut,
    "ProjectCompletionWorkflow": project_completion_workflow,
    "ConditionalBudgetApproval": conditional_budget_approval,
    "InsufficientBudgetRejection": insufficient_budget_rejection,
    "MultiActionProject": multi_action_project,
    "DepartmentTransfer": department_transfer,
    "BudgetFreezeAction": budget_freeze_action,
}


def run_scenarios(names: list[str] | None = None) -> list[ScenarioOutcome]:
    """Run named scenarios in declaration order.

    Args:
        names: Scenarios to run. If None, run all of them.

    Returns:
        One ScenarioOutcome per scenario run.

    Raises:
        ValueError: If a requested scenario does not exist.
    """
    selected = list(SCENARIOS) if names is None else names
    unknown = [name for name in selected if name not in SCENARIOS]
    if unknown:
        raise ValueError(f"Unknown scenarios: {', '.join(unknown)}")

    outcomes = []
    for name in selected:
        project, failures = SCENARIOS[name]()
        outcome = ScenarioOutcome(
            name=name,
            passed=not failures,
            failures=tuple(failures),
            snapshot=project.snapshot(),
        )
        if outcome.passed:
            logger.info(f"Scenario {name} passed")
        else:
            logger.warning(
                f"Scenario {name} failed",
                extra={"failures": outcome.failures},
            )
        outcomes.append(outcome)

    return outcomes


async def report_scenarios(outcomes: list[ScenarioOutcome], report: ReportPort) -> ProcessResult:
    """Publish each scenario's processed project, then a run summary.

    Report failures are logged and do not stop the remaining reports.
    Outcomes without a snapshot are skipped.

    Returns:
        ProcessResult aggregated over the reported projects.
    """
    snapshots = [outcome.snapshot for outcome in outcomes if outcome.snapshot is not None]

    for snapshot in snapshots:
        try:
            await report.report(snapshot)
        except Exception as e:
            logger.error(f"Failed to report scenario project {snapshot.name}: {e}", exc_info=True)

    result = ProcessResult(
        projects_processed=len(snapshots),
        actions_applied=sum(len(s.actions) for s in snapshots),
        funded_count=sum(1 for s in snapshots if s.funded),
        completed_count=sum(1 for s in snapshots if s.completed),
        total_budget=sum(s.budget for s in snapshots),
        timestamp=datetime.now(UTC),
    )

    try:
        await report.report_summary(result)
    except Exception as e:
        logger.error(f"Failed to report scenario summary: {e}", exc_info=True)

    return result
