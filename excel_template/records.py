"""
Read-only access to the data model.

The renderer only asks a record two things: whether it has a field, and
the field's value.  Parsed JSON/YAML (mappings) and plain Python objects
are adapted to that shape by :func:`as_record`.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Record(Protocol):
    def has_field(self, name: str) -> bool: ...

    def get_field(self, name: str) -> Any: ...


class MappingRecord:
    """Record backed by a mapping; a field exists when its key does."""

    def __init__(self, data: Mapping):
        self.data = data

    def has_field(self, name: str) -> bool:
        return name in self.data

    def get_field(self, name: str) -> Any:
        return self.data[name]

    def __repr__(self):
        return f"MappingRecord({list(self.data)!r})"


class ObjectRecord:
    """Record backed by an object's attributes (dataclasses, namespaces)."""

    def __init__(self, obj: Any):
        self.obj = obj

    def has_field(self, name: str) -> bool:
        return hasattr(self.obj, name)

    def get_field(self, name: str) -> Any:
        return getattr(self.obj, name)

    def __repr__(self):
        return f"ObjectRecord({type(self.obj).__name__})"


def as_record(obj: Any) -> Record:
    if isinstance(obj, Record):
        return obj
    if isinstance(obj, Mapping):
        return MappingRecord(obj)
    return ObjectRecord(obj)
