"""Test suite for the govtrack project registry.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No I/O, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Report output to stdout and markdown files

3. fakes/: Port implementations for testing
   - In-memory implementations of ReportPort and RegistryPort
"""
