"""
Mutations package for the record semantics demo.

Re-exports the passing modes and the six mutation operations so downstream
code can import from `recorddemo.mutations` directly.
"""

from recorddemo.mutations.operations import (
    add_meta_by_copy,
    add_meta_by_reference,
    add_tag_by_copy,
    add_tag_by_reference,
    rename_by_copy,
    rename_by_reference,
)
from recorddemo.mutations.passing import (
    CopyMode,
    PassingMode,
    available_copy_modes,
    by_copy,
    by_reference,
    resolve_copy_mode,
)

__all__ = [
    # Passing modes
    "CopyMode",
    "PassingMode",
    "available_copy_modes",
    "by_copy",
    "by_reference",
    "resolve_copy_mode",
    # Operations
    "add_meta_by_copy",
    "add_meta_by_reference",
    "add_tag_by_copy",
    "add_tag_by_reference",
    "rename_by_copy",
    "rename_by_reference",
]
