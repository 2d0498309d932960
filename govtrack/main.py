"""Composition root for the govtrack project registry.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Entry point selection (scenarios, CLI)
"""

import asyncio
import json
import logging
import sys

from govtrack.adapters.cli.commands import run_command
from govtrack.adapters.report.markdown import MarkdownReportAdapter
from govtrack.adapters.report.stdout import StdoutReportAdapter
from govtrack.config import Settings, load_settings
from govtrack.core.models import ScenarioOutcome
from govtrack.core.ports import RegistryPort, ReportPort
from govtrack.core.registry_service import RegistryService
from govtrack.core.scenarios import report_scenarios, run_scenarios


async def _run_cli_interactive(registry: RegistryPort) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for registry commands.

    Args:
        registry: RegistryPort implementation commands are executed against.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            # Read from stdin in a thread to avoid blocking the loop
            command_line = await loop.run_in_executor(None, input, "govtrack> ")
            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object.")
                continue

            try:
                result = await run_command(registry, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  add
    Add a project with its ordered list of actions.
    Required: name, department, budget
    Optional: funded, actions
    Action types: approve_funding, adjust_budget (amount), complete_project,
                  conditional_approval (action, min_budget),
                  department_transfer (new_department), budget_freeze

    Example: add {"name": "City Park", "department": "Environment", "budget": 500000,
                  "actions": [{"type": "department_transfer", "new_department": "Urban Development"}]}

  process
    Apply every project's actions, in insertion order.

  list
    List projects, optionally filtered by department.

    Example: list {"department": "Culture", "format": "text"}

  details
    Show the current state of a project.
    Required: name

    Example: details {"name": "City Park"}

  help
    Show this help message.

  exit
    Exit the CLI.
    """
    print(help_text)


def _print_scenario_results(outcomes: list[ScenarioOutcome]) -> None:
    for outcome in outcomes:
        print(f"[{'PASS' if outcome.passed else 'FAIL'}] {outcome.name}")
        for failure in outcome.failures:
            print(f"    {failure}")
    passed = sum(1 for outcome in outcomes if outcome.passed)
    print(f"{passed}/{len(outcomes)} scenarios passed")


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_report_adapter(settings: Settings) -> ReportPort:
    """Instantiate the report adapter selected by configuration."""
    if settings.report_backend == "markdown":
        return MarkdownReportAdapter(report_dir=settings.report_output_dir)
    return StdoutReportAdapter(verbose=settings.debug)


async def bootstrap() -> int:
    """Load configuration, wire adapters, and run the selected mode.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate the report adapter (used by both run modes)
    4. Initialize the registry service
    5. Select and start run mode

    Returns:
        Process exit code.
    """
    settings = load_settings()

    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading govtrack project registry...")

    report = build_report_adapter(settings)
    logger.info(f"Report adapter: {type(report).__name__}")

    logger.info(f"Starting in {settings.run_mode} mode...")

    if settings.run_mode == "scenarios":
        outcomes = run_scenarios()
        await report_scenarios(outcomes, report)
        _print_scenario_results(outcomes)
        return 0 if all(outcome.passed for outcome in outcomes) else 1

    await _run_cli_interactive(RegistryService(report=report))
    return 0


def main() -> None:
    """Application entry point.

    Exit codes:
        0: All scenarios passed or CLI exited normally
        1: A scenario failed or a fatal error occurred
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        exit_code = asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
