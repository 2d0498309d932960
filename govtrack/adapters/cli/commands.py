"""CLI command implementations for the govtrack registry.

This adapter maps CLI commands (add, process, list, details) to RegistryPort
operations. It handles CLI-specific parsing, formatting and error reporting.
"""

import logging
from dataclasses import asdict
from typing import Any

from govtrack.core.actions import action_from_dict
from govtrack.core.models import Project, ProjectSnapshot
from govtrack.core.ports import RegistryPort

logger = logging.getLogger(__name__)


def project_from_dict(data: dict[str, Any]) -> Project:
    """Build a project, including its actions, from a JSON object.

    Expected shape::

        {"name": "River Bridge", "department": "Transportation",
         "funded": false, "budget": 1000000,
         "actions": [{"type": "approve_funding"}]}

    Raises:
        ValueError: If a required field is missing or an action is invalid.
    """
    missing = [key for key in ("name", "department", "budget") if key not in data]
    if missing:
        raise ValueError(f"Missing required parameter: {', '.join(missing)}")

    actions = data.get("actions", [])
    if not isinstance(actions, list):
        raise ValueError("actions must be a list")

    try:
        budget = float(data["budget"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid budget: {data['budget']!r}") from e

    for key in ("name", "department"):
        if not isinstance(data[key], str):
            raise ValueError(f"{key} must be a string")

    funded = data.get("funded", False)
    if not isinstance(funded, bool):
        raise ValueError("funded must be a boolean")

    return Project(
        name=data["name"],
        department=data["department"],
        funded=funded,
        budget=budget,
        actions=[action_from_dict(action) for action in actions],
    )


class CLICommandHandler:
    """Handles CLI commands by delegating to RegistryPort."""

    def __init__(self, registry: RegistryPort):
        """Initialize the CLI command handler.

        Args:
            registry: RegistryPort implementation to execute commands.
        """
        self.registry = registry

    async def add_project(self, data: dict[str, Any]) -> dict[str, Any]:
        """Add a project described by a JSON object.

        Returns:
            Dictionary with status and message.
        """
        try:
            project = project_from_dict(data)
            await self.registry.add_project(project)

            return {
                "status": "success",
                "operation": "add",
                "project": project.name,
                "message": f"Project {project.name} added with {len(project.actions)} actions",
            }

        except ValueError as e:
            logger.error(f"Failed to add project: {e}")
            return {
                "status": "error",
                "operation": "add",
                "message": str(e),
            }

    async def process_all(self) -> dict[str, Any]:
        """Process every project in the registry."""
        result = await self.registry.process_all()

        return {
            "status": "success",
            "operation": "process",
            "data": asdict(result),
        }

    async def list_projects(
        self, department: str | None = None, output_format: str = "json"
    ) -> dict[str, Any]:
        """List projects via CLI.

        Args:
            department: Only list projects in this department.
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the project list or status/message on error.
        """
        snapshots = await self.registry.list_projects(department)

        if output_format == "json":
            return {
                "status": "success",
                "operation": "list",
                "count": len(snapshots),
                "data": [asdict(snapshot) for snapshot in snapshots],
            }

        elif output_format == "text":
            return {
                "status": "success",
                "operation": "list",
                "count": len(snapshots),
                "data": "\n".join(self._format_summary_line(s) for s in snapshots),
            }

        return {
            "status": "error",
            "operation": "list",
            "message": f"Unsupported format: {output_format}",
        }

    async def get_project(
        self, name: str, output_format: str = "json"
    ) -> dict[str, Any]:
        """Retrieve a project's current state via CLI.

        Args:
            name: Project name.
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with project details or status/message on error.
        """
        try:
            snapshot = await self.registry.get_project(name)

            if output_format == "json":
                data: Any = asdict(snapshot)
            elif output_format == "text":
                data = self._format_details_as_text(snapshot)
            else:
                return {
                    "status": "error",
                    "operation": "details",
                    "message": f"Unsupported format: {output_format}",
                }

            return {
                "status": "success",
                "operation": "details",
                "data": data,
            }

        except ValueError as e:
            logger.error(f"Failed to get project details: {e}")
            return {
                "status": "error",
                "operation": "details",
                "project": name,
                "message": str(e),
            }

    @staticmethod
    def _format_summary_line(snapshot: ProjectSnapshot) -> str:
        flags = []
        if snapshot.funded:
            flags.append("funded")
        if snapshot.completed:
            flags.append("completed")
        return (
            f"{snapshot.name} [{snapshot.department}] "
            f"budget={snapshot.budget:,.2f} {' '.join(flags)}".rstrip()
        )

    @staticmethod
    def _format_details_as_text(snapshot: ProjectSnapshot) -> str:
        lines = [
            f"Project: {snapshot.name}",
            f"Department: {snapshot.department}",
            f"Funded: {snapshot.funded}",
            f"Budget: {snapshot.budget:,.2f}",
            f"Completed: {snapshot.completed}",
        ]
        if snapshot.actions:
            lines.append("Actions:")
            lines.extend(f"  - {action}" for action in snapshot.actions)
        return "\n".join(lines)


async def run_command(
    registry: RegistryPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        registry: RegistryPort implementation.
        command: Command name ('add', 'process', 'list', 'details').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If the command is not recognized or a required argument is missing.
    """
    handler = CLICommandHandler(registry)

    if command == "add":
        return await handler.add_project(args)

    elif command == "process":
        return await handler.process_all()

    elif command == "list":
        return await handler.list_projects(
            department=args.get("department"),
            output_format=args.get("format", "json"),
        )

    elif command == "details":
        if "name" not in args:
            raise ValueError("Missing required parameter: name")
        return await handler.get_project(
            args["name"],
            output_format=args.get("format", "json"),
        )

    else:
        raise ValueError(f"Unknown command: {command}")
