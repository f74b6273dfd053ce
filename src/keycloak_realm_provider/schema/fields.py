"""
Declarative field descriptors for resource schemas.

A ResourceSchema lists, per field, its kind, whether it is required,
its default, whether changing it forces the resource to be replaced, and
an optional validator. The codec, the planner and input validation are all
driven by this table rather than by per-field code.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..errors import ValidationError

if TYPE_CHECKING:
    from ..models.document import ResourceDocument


class FieldKind(str, Enum):
    """Value kinds a schema field can hold."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    LIST = "list"
    MAP = "map"


@dataclass(frozen=True)
class FieldSchema:
    """Descriptor for a single document field."""

    name: str
    kind: FieldKind
    required: bool = False
    default: Any = None
    force_new: bool = False
    validator: Callable[[Any], None] | None = None
    description: str = ""
    attribute: str | None = None

    @property
    def record_attribute(self) -> str:
        """Attribute holding this field on the domain record."""
        return self.attribute or self.name

    @property
    def presence_tracked(self) -> bool:
        """Whether unset and explicitly-set values must be told apart."""
        return not self.required and self.default is None

    def matches_kind(self, value: Any) -> bool:
        if self.kind is FieldKind.STRING:
            return isinstance(value, str)
        if self.kind is FieldKind.BOOL:
            return isinstance(value, bool)
        if self.kind is FieldKind.INT:
            # bool is an int subclass but never a valid integer setting
            return isinstance(value, int) and not isinstance(value, bool)
        if self.kind is FieldKind.LIST:
            return isinstance(value, list | tuple) and all(
                isinstance(item, str) for item in value
            )
        if self.kind is FieldKind.MAP:
            return isinstance(value, Mapping)
        return False

    def validate_value(self, value: Any) -> None:
        """
        Check a set value against the field kind and validator.

        Raises:
            ValidationError: If the value has the wrong kind or is rejected
        """
        if not self.matches_kind(value):
            raise ValidationError(
                f"expected {self.kind.value}, got {type(value).__name__}",
                field=self.name,
            )
        if self.validator is not None:
            try:
                self.validator(value)
            except ValueError as e:
                raise ValidationError(str(e), field=self.name) from e


class ResourceSchema:
    """Ordered collection of field descriptors for one resource kind."""

    def __init__(self, resource_type: str, fields: Iterable[FieldSchema]) -> None:
        self.resource_type = resource_type
        self._fields: dict[str, FieldSchema] = {}
        for field in fields:
            if field.name in self._fields:
                raise ValueError(f"Duplicate field {field.name!r} in schema")
            self._fields[field.name] = field

    def __iter__(self) -> Iterator[FieldSchema]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def field(self, name: str) -> FieldSchema:
        try:
            return self._fields[name]
        except KeyError:
            raise KeyError(
                f"Unknown field {name!r} for {self.resource_type}"
            ) from None

    @property
    def required_fields(self) -> list[FieldSchema]:
        return [field for field in self if field.required]

    @property
    def force_new_fields(self) -> list[FieldSchema]:
        return [field for field in self if field.force_new]

    def validate(self, document: "ResourceDocument") -> None:
        """
        Validate a configuration document against the schema.

        Args:
            document: Configuration document to check

        Raises:
            ValidationError: On unknown fields, missing required fields,
                wrong value kinds or validator failures
        """
        for name in document:
            if name not in self._fields:
                raise ValidationError(
                    f"unknown field for {self.resource_type}", field=name
                )

        for field in self:
            value, present = document.get_ok(field.name)
            if not present:
                if field.required:
                    raise ValidationError("field is required", field=field.name)
                continue
            field.validate_value(value)
