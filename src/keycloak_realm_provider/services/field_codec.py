"""
Schema-driven translation between configuration documents and records.

The codec walks the schema field table in both directions:

- decode: document -> record. Required fields are read directly, defaulted
  fields fall back to their default, and presence-tracked fields are read
  only when the document marks them as set. Anything else stays ``None`` on
  the record, which keeps it out of the API payload.
- encode: record -> document. Required and defaulted fields are always
  written; presence-tracked fields only when the record carries a value, so
  fields the user never configured keep their current representation.
"""

import logging
from copy import deepcopy
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError
from ..models.document import ResourceDocument
from ..schema.fields import FieldKind, FieldSchema, ResourceSchema

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class FieldCodec(Generic[RecordT]):
    """Bidirectional mapping between ResourceDocument and a record model."""

    def __init__(self, schema: ResourceSchema, record_type: type[RecordT]) -> None:
        self.schema = schema
        self.record_type = record_type

    def decode(self, document: ResourceDocument) -> RecordT:
        """
        Build a record from a configuration document.

        Args:
            document: Configuration document, validated against the schema

        Returns:
            Record instance; identity is set unless the document is new

        Raises:
            ValidationError: If the record cannot be constructed
        """
        values: dict[str, Any] = {}

        for field in self.schema:
            value, present = document.get_ok(field.name)
            if present:
                values[field.record_attribute] = _decode_value(field, value)
            elif field.default is not None:
                values[field.record_attribute] = deepcopy(field.default)

        if not document.is_new_resource:
            values["id"] = document.id

        try:
            return self.record_type.model_validate(values)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid {self.schema.resource_type} configuration: {e}"
            ) from e

    def encode(
        self, record: RecordT, document: ResourceDocument | None = None
    ) -> ResourceDocument:
        """
        Write a record into a configuration document.

        Args:
            record: Record to encode
            document: Existing document to start from; not modified

        Returns:
            New document holding the record's values and identity
        """
        result = document.copy() if document is not None else ResourceDocument()
        result.id = getattr(record, "id", None)

        for field in self.schema:
            value = getattr(record, field.record_attribute)
            if value is None and field.presence_tracked:
                continue
            result.set(field.name, _encode_value(field, value))

        logger.debug(
            f"Encoded {self.schema.resource_type} {result.id} "
            f"with {len(result)} set fields"
        )
        return result


def _decode_value(field: FieldSchema, value: Any) -> Any:
    if field.kind is FieldKind.LIST:
        return list(value)
    if field.kind is FieldKind.MAP:
        return dict(value)
    return value


def _encode_value(field: FieldSchema, value: Any) -> Any:
    if field.kind is FieldKind.LIST and value is not None:
        return list(value)
    if field.kind is FieldKind.MAP and value is not None:
        return dict(value)
    return value
