"""
Explicit parameter-passing modes for record mutations.

Python always passes object references, so both modes are spelled out here
instead of being left to aliasing rules:

- `by_reference` hands the callee the caller's own record.
- `by_copy` hands the callee a duplicate made before the call. With the
  default shallow copy mode the duplicate's scalar fields are independent but
  its `tags`/`meta` refer to the same containers as the original, if those
  were already allocated. Deep copy mode duplicates the containers as well.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from recorddemo.config import get_settings
from recorddemo.domain.models import Record


class PassingMode(str, Enum):
    """How a mutation receives its record."""

    COPY = "copy"
    REFERENCE = "reference"


class CopyMode(str, Enum):
    """How deep a by-copy duplicate goes."""

    SHALLOW = "shallow"
    DEEP = "deep"


def available_copy_modes() -> List[str]:
    """List copy mode names."""
    return [mode.value for mode in CopyMode]


def resolve_copy_mode(copy_mode: Optional[str | CopyMode] = None) -> CopyMode:
    """
    Resolve a copy mode name, falling back to settings when None.

    Raises
    ------
    ValueError
        If the name is not a known copy mode.
    """
    if copy_mode is None:
        copy_mode = get_settings().copy_mode
    if isinstance(copy_mode, CopyMode):
        return copy_mode
    try:
        return CopyMode(copy_mode)
    except ValueError:
        raise ValueError(
            f"Unknown copy mode '{copy_mode}'. Available: {', '.join(available_copy_modes())}"
        ) from None


def by_copy(record: Record, copy_mode: Optional[str | CopyMode] = None) -> Record:
    """Return a duplicate of `record`; changes to its scalars never reach the caller."""
    mode = resolve_copy_mode(copy_mode)
    return record.model_copy(deep=mode is CopyMode.DEEP)


def by_reference(record: Record) -> Record:
    """Return `record` itself; every change is visible to the caller."""
    return record


__all__ = [
    "CopyMode",
    "PassingMode",
    "available_copy_modes",
    "by_copy",
    "by_reference",
    "resolve_copy_mode",
]
