"""External adapters for the govtrack project registry.

This package contains all I/O and provides implementations of the core
port interfaces.

Adapter Organization:

- report/: Adapters for publishing processed projects (stdout, markdown)
- cli/: Command-line interface and registry commands
"""
