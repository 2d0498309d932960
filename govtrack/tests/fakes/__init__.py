"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic and adapters to
be tested without I/O:

- FakeReportPort: Captured reports for assertion
- FakeRegistryPort: Captured registry operations
"""

from .registry import FakeRegistryPort
from .report import FakeReportPort

__all__ = [
    "FakeRegistryPort",
    "FakeReportPort",
]
