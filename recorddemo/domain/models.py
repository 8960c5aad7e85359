"""
Domain models for the record semantics demo.

Defines the composite `Record` whose copies and references the demo mutates.
Container fields (`tags`, `meta`) start unallocated (None) and are created on
first write through an explicit `ensure_*` step, so a shallow duplicate taken
before that write never shares storage with the original.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    Composite record with a scalar identity, a text field and two containers.
    """

    id: int = Field(..., frozen=True, description="Identifier, fixed at creation.")
    name: str = Field(..., description="Mutable display name.")
    tags: Optional[List[str]] = Field(None, description="Ordered tags; None until first append.")
    meta: Optional[Dict[str, str]] = Field(None, description="Key/value metadata; None until first insert.")

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def ensure_tags(self) -> List[str]:
        """Allocate the tag list on this record if absent and return it."""
        if self.tags is None:
            self.tags = []
        return self.tags

    def ensure_meta(self) -> Dict[str, str]:
        """Allocate the metadata mapping on this record if absent and return it."""
        if self.meta is None:
            self.meta = {}
        return self.meta

    @property
    def tag_list(self) -> List[str]:
        return list(self.tags) if self.tags is not None else []

    @property
    def meta_items(self) -> Dict[str, str]:
        return dict(self.meta) if self.meta is not None else {}

    def snapshot(self) -> Dict[str, Any]:
        """
        Field-by-field value of the record, detached from its containers.

        Absent containers stay None so that "absent" and "allocated but empty"
        remain distinguishable when comparing snapshots.
        """
        return self.model_dump()

    def describe(self) -> str:
        return f"{{id: {self.id}, name: {self.name!r}, tags: {self.tag_list!r}, meta: {self.meta_items!r}}}"


__all__ = ["Record"]
