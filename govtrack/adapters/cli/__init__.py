"""Command-line interface adapters.

Provides CLI commands for working with the registry:
- add: Add a project described as JSON
- process: Apply every project's actions
- list: List projects, optionally by department
- details: Show the current state of a project
"""
