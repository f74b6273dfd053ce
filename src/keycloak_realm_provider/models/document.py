"""
Configuration document with per-field presence tracking.

A ResourceDocument is the shape exchanged with the hosting framework: a flat
mapping of snake_cased field names to values plus the resource identity. A
field is "set" only when its key is present, so an explicit ``0``, ``False``
or empty list is distinguishable from a field that was never configured.
"""

from collections.abc import Iterator, Mapping
from copy import deepcopy
from typing import Any

from ..constants import ID_FIELD


class ResourceDocument:
    """Field values of one resource instance, keyed by schema field name."""

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        resource_id: str | None = None,
    ) -> None:
        self._values: dict[str, Any] = {}
        self._id = resource_id or None
        for name, value in (values or {}).items():
            self.set(name, value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResourceDocument":
        """Build a document from a plain mapping, taking ``id`` as the identity."""
        values = dict(data)
        resource_id = values.pop(ID_FIELD, None)
        return cls(values, resource_id=resource_id)

    @property
    def id(self) -> str | None:
        return self._id

    @id.setter
    def id(self, value: str | None) -> None:
        self._id = value or None

    @property
    def is_new_resource(self) -> bool:
        """True until the resource has been assigned an identity."""
        return self._id is None

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def get_ok(self, name: str) -> tuple[Any, bool]:
        """Return the field value and whether it was explicitly set."""
        if name in self._values:
            return self._values[name], True
        return None, False

    def is_set(self, name: str) -> bool:
        return name in self._values

    def set(self, name: str, value: Any) -> None:
        """Set a field value; ``None`` marks the field as unset."""
        if name == ID_FIELD:
            self.id = value
        elif value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = deepcopy(value)

    def unset(self, name: str) -> None:
        self._values.pop(name, None)

    def copy(self) -> "ResourceDocument":
        return ResourceDocument(self._values, resource_id=self._id)

    def as_dict(self) -> dict[str, Any]:
        """Return the set fields as a plain dict, including ``id`` when assigned."""
        data = deepcopy(self._values)
        if self._id is not None:
            data[ID_FIELD] = self._id
        return data

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceDocument):
            return NotImplemented
        return self._id == other._id and self._values == other._values

    def __repr__(self) -> str:
        return f"ResourceDocument(id={self._id!r}, values={self._values!r})"
