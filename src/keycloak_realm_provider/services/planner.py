"""
Change planning between tracked state and a desired configuration.

The planner decides which operation a desired document needs. A field that
is unset in the desired document and has no default is not a change: the
remote system keeps whatever value it has. A change to a force-new field
turns an update into a replacement (destroy then recreate).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..models.document import ResourceDocument
from ..schema.fields import ResourceSchema


class PlanAction(str, Enum):
    """Operation required to converge a resource."""

    CREATE = "create"
    UPDATE = "update"
    REPLACE = "replace"
    DELETE = "delete"
    NOOP = "noop"


@dataclass(frozen=True)
class Plan:
    """Planned action with the fields that drive it."""

    action: PlanAction
    changed_fields: tuple[str, ...] = ()
    replace_fields: tuple[str, ...] = ()

    @property
    def requires_replace(self) -> bool:
        return self.action is PlanAction.REPLACE


def diff_fields(
    schema: ResourceSchema, prior: ResourceDocument, desired: ResourceDocument
) -> list[str]:
    """
    List the fields whose desired value differs from tracked state.

    Args:
        schema: Schema of the resource
        prior: Tracked state document
        desired: Desired configuration document

    Returns:
        Changed field names in schema order
    """
    changed = []
    for field in schema:
        desired_value, desired_set = desired.get_ok(field.name)
        if not desired_set:
            if field.presence_tracked:
                continue
            desired_value = field.default

        prior_value = prior.get(field.name, field.default)
        if _normalize(prior_value) != _normalize(desired_value):
            changed.append(field.name)
    return changed


def plan(
    schema: ResourceSchema,
    prior: ResourceDocument | None,
    desired: ResourceDocument | None,
) -> Plan:
    """
    Plan the operation that converges tracked state to the desired document.

    Args:
        schema: Schema of the resource
        prior: Tracked state, or None when the resource is unmanaged
        desired: Desired configuration, or None when it was removed

    Returns:
        Plan describing the action and the fields involved
    """
    managed = prior is not None and not prior.is_new_resource

    if desired is None:
        return Plan(PlanAction.DELETE) if managed else Plan(PlanAction.NOOP)

    if not managed:
        return Plan(PlanAction.CREATE, changed_fields=tuple(desired))

    changed = diff_fields(schema, prior, desired)
    if not changed:
        return Plan(PlanAction.NOOP)

    force_new = {field.name for field in schema.force_new_fields}
    replace = tuple(name for name in changed if name in force_new)
    if replace:
        return Plan(
            PlanAction.REPLACE, changed_fields=tuple(changed), replace_fields=replace
        )
    return Plan(PlanAction.UPDATE, changed_fields=tuple(changed))


def _normalize(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, Mapping):
        return dict(value)
    return value
