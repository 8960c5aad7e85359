from __future__ import annotations

import pytest

from recorddemo.domain.models import Record
from recorddemo.mutations.operations import (
    add_meta_by_copy,
    add_meta_by_reference,
    add_tag_by_copy,
    add_tag_by_reference,
    rename_by_copy,
    rename_by_reference,
)

COPY_MODES = ["shallow", "deep"]


@pytest.mark.parametrize("copy_mode", COPY_MODES)
def test_copy_operations_leave_fresh_record_untouched(record: Record, copy_mode: str):
    before = record.snapshot()

    rename_by_copy(record, "Bob", copy_mode=copy_mode)
    add_tag_by_copy(record, "golang", copy_mode=copy_mode)
    add_meta_by_copy(record, "role", "admin", copy_mode=copy_mode)

    assert record.snapshot() == before


def test_operations_return_none(record: Record):
    assert rename_by_copy(record, "Bob") is None
    assert rename_by_reference(record, "Charlie") is None
    assert add_tag_by_copy(record, "golang") is None
    assert add_tag_by_reference(record, "programmer") is None
    assert add_meta_by_copy(record, "role", "admin") is None
    assert add_meta_by_reference(record, "department", "engineering") is None


def test_rename_scenario(record: Record):
    rename_by_copy(record, "Bob")
    assert record.snapshot() == {"id": 1, "name": "Alice", "tags": None, "meta": None}

    rename_by_reference(record, "Charlie")
    assert record.snapshot() == {"id": 1, "name": "Charlie", "tags": None, "meta": None}


def test_tag_scenario(record: Record):
    add_tag_by_copy(record, "golang")
    assert record.tag_list == []

    add_tag_by_reference(record, "programmer")
    assert record.tags == ["programmer"]


def test_meta_scenario(record: Record):
    add_meta_by_copy(record, "role", "admin")
    assert record.meta is None
    assert record.meta_items == {}

    add_meta_by_reference(record, "department", "engineering")
    assert record.meta == {"department": "engineering"}
    assert "role" not in record.meta


def test_reference_operations_change_only_their_field(record: Record):
    before = record.snapshot()
    add_tag_by_reference(record, "programmer")
    after = record.snapshot()

    assert after["tags"] == ["programmer"]
    assert {k: v for k, v in after.items() if k != "tags"} == {
        k: v for k, v in before.items() if k != "tags"
    }


def test_add_meta_by_reference_is_idempotent(record: Record):
    add_meta_by_reference(record, "department", "engineering")
    first = record.snapshot()

    add_meta_by_reference(record, "department", "engineering")

    assert record.snapshot() == first
    assert record.meta == {"department": "engineering"}


def test_add_meta_by_reference_overwrites_existing_key(record: Record):
    add_meta_by_reference(record, "department", "engineering")
    add_meta_by_reference(record, "department", "sales")
    assert record.meta == {"department": "sales"}


def test_shallow_copy_leaks_into_allocated_containers(record: Record):
    add_tag_by_reference(record, "programmer")
    add_meta_by_reference(record, "department", "engineering")

    add_tag_by_copy(record, "golang", copy_mode="shallow")
    add_meta_by_copy(record, "role", "admin", copy_mode="shallow")

    assert record.tags == ["programmer", "golang"]
    assert record.meta == {"department": "engineering", "role": "admin"}


def test_deep_copy_never_leaks_into_allocated_containers(record: Record):
    add_tag_by_reference(record, "programmer")
    add_meta_by_reference(record, "department", "engineering")

    add_tag_by_copy(record, "golang", copy_mode="deep")
    add_meta_by_copy(record, "role", "admin", copy_mode="deep")

    assert record.tags == ["programmer"]
    assert record.meta == {"department": "engineering"}


def test_copy_operations_reject_unknown_copy_mode(record: Record):
    with pytest.raises(ValueError, match="Unknown copy mode"):
        rename_by_copy(record, "Bob", copy_mode="sideways")
    assert record.name == "Alice"
