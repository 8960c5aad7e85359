"""
Domain package for the record semantics demo.

Exports the record model mutated by the demonstration. Keep this package
focused on data definitions.
"""

from recorddemo.domain.models import Record

__all__ = [
    "Record",
]
