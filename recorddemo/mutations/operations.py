"""
The six record mutations, each in a by-copy and a by-reference flavour.

Every public operation pairs one passing mode with a shared mutation body and
returns None. The by-copy variants discard their duplicate on return.
"""

from __future__ import annotations

from typing import Optional

from recorddemo.domain.models import Record
from recorddemo.mutations.passing import CopyMode, by_copy, by_reference


def _rename(record: Record, new_name: str) -> None:
    record.name = new_name


def _add_tag(record: Record, tag: str) -> None:
    record.ensure_tags().append(tag)


def _add_meta(record: Record, key: str, value: str) -> None:
    record.ensure_meta()[key] = value


def rename_by_copy(
    record: Record, new_name: str, *, copy_mode: Optional[str | CopyMode] = None
) -> None:
    _rename(by_copy(record, copy_mode), new_name)


def rename_by_reference(record: Record, new_name: str) -> None:
    _rename(by_reference(record), new_name)


def add_tag_by_copy(
    record: Record, tag: str, *, copy_mode: Optional[str | CopyMode] = None
) -> None:
    """
    Append `tag` to a duplicate's tags.

    Under shallow copy this only stays off the original while the original's
    tags are unallocated; the duplicate then allocates a list of its own.
    """
    _add_tag(by_copy(record, copy_mode), tag)


def add_tag_by_reference(record: Record, tag: str) -> None:
    _add_tag(by_reference(record), tag)


def add_meta_by_copy(
    record: Record, key: str, value: str, *, copy_mode: Optional[str | CopyMode] = None
) -> None:
    """
    Insert `key -> value` into a duplicate's metadata.

    Same caveat as `add_tag_by_copy`: an already allocated mapping is shared
    by a shallow duplicate.
    """
    _add_meta(by_copy(record, copy_mode), key, value)


def add_meta_by_reference(record: Record, key: str, value: str) -> None:
    _add_meta(by_reference(record), key, value)


__all__ = [
    "add_meta_by_copy",
    "add_meta_by_reference",
    "add_tag_by_copy",
    "add_tag_by_reference",
    "rename_by_copy",
    "rename_by_reference",
]
