"""
Record Semantics Demo - copy vs reference passing for a composite record.

Shows how changes made by a function reach, or fail to reach, the caller's
record depending on whether the function gets a duplicate or the record
itself, and how shallow duplication interacts with nested containers:

- Renaming by copy and by reference
- Appending tags by copy and by reference
- Inserting metadata by copy and by reference, with lazy mapping allocation
- A leak probe showing where shallow copies stop being independent
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from recorddemo.config import Settings, get_settings
from recorddemo.domain.models import Record
from recorddemo.mutations import (
    CopyMode,
    PassingMode,
    add_meta_by_copy,
    add_meta_by_reference,
    add_tag_by_copy,
    add_tag_by_reference,
    by_copy,
    by_reference,
    rename_by_copy,
    rename_by_reference,
)
from recorddemo.orchestrator import DemoRun, StepResult, run_demo, run_leak_probe
from recorddemo.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    # Passing modes
    "CopyMode",
    "PassingMode",
    "by_copy",
    "by_reference",
    # Operations
    "add_meta_by_copy",
    "add_meta_by_reference",
    "add_tag_by_copy",
    "add_tag_by_reference",
    "rename_by_copy",
    "rename_by_reference",
    # Orchestration
    "DemoRun",
    "StepResult",
    "run_demo",
    "run_leak_probe",
    # Logging
    "configure_logging",
    "get_logger",
]
