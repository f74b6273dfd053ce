"""
Base controller providing the resource lifecycle against a remote API.

This module defines the BaseController class that implements the create,
read, update, delete and import operations once, in terms of four remote
hooks, a schema and a field codec. Resource kinds subclass it and bind the
hooks to their client.

State per resource instance: unmanaged (no identity) -> managed (identity
tracked) -> unmanaged. A read that observes not-found returns None so the
caller drops tracked state; a delete that observes not-found succeeds.
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager, nullcontext
from typing import Generic, TypeVar

from pydantic import BaseModel

from ..constants import (
    OPERATION_CREATE,
    OPERATION_DELETE,
    OPERATION_IMPORT,
    OPERATION_READ,
    OPERATION_UPDATE,
)
from ..errors import NotFoundError, ProviderError, TransportError
from ..models.document import ResourceDocument
from ..observability.logging import ProviderLogger
from ..observability.metrics import MetricsCollector
from ..schema.fields import ResourceSchema
from .field_codec import FieldCodec
from .planner import PlanAction, plan

RecordT = TypeVar("RecordT", bound=BaseModel)


class BaseController(ABC, Generic[RecordT]):
    """
    Base class for resource controllers.

    Provides:
    - Input validation against the schema before any network call
    - Document <-> record translation through the field codec
    - Destroy+recreate when a force-new field changes
    - Not-found recovery during read and delete
    - Structured logging, metrics and error context per operation
    """

    def __init__(
        self,
        schema: ResourceSchema,
        record_type: type[RecordT],
        metrics: MetricsCollector | None = None,
    ) -> None:
        """
        Initialize base controller.

        Args:
            schema: Schema descriptor of the managed resource kind
            record_type: Pydantic model of the domain record
            metrics: Metrics collector, or None to disable metrics
        """
        self.schema = schema
        self.codec: FieldCodec[RecordT] = FieldCodec(schema, record_type)
        self.metrics = metrics
        self.logger = ProviderLogger(self.__class__.__name__)

    @property
    def resource_type(self) -> str:
        return self.schema.resource_type

    # Remote hooks

    @abstractmethod
    def remote_get(self, resource_id: str) -> RecordT:
        """Fetch a record; raise NotFoundError if it does not exist."""

    @abstractmethod
    def remote_create(self, record: RecordT) -> RecordT:
        """Create a record; return it with its assigned identity."""

    @abstractmethod
    def remote_update(self, record: RecordT) -> None:
        """Replace a record in full."""

    @abstractmethod
    def remote_delete(self, resource_id: str) -> None:
        """Delete a record; raise NotFoundError if it does not exist."""

    # Public operations

    def create(self, document: ResourceDocument) -> ResourceDocument:
        """
        Create the resource described by a configuration document.

        Args:
            document: Desired configuration

        Returns:
            Tracked state read back from the remote, including its identity
            and any server-assigned defaults
        """
        with self.track_operation(OPERATION_CREATE):
            return self._create(document)

    def read(
        self, resource_id: str, document: ResourceDocument | None = None
    ) -> ResourceDocument | None:
        """
        Refresh tracked state from the remote.

        Args:
            resource_id: Identity of the resource
            document: Current tracked state, if any

        Returns:
            Refreshed state, or None if the resource no longer exists
        """
        with self.track_operation(OPERATION_READ, resource_id):
            state = self._read(resource_id, document)
            if state is None:
                self.logger.warning(
                    f"{self.resource_type} {resource_id} not found, dropping tracked state",
                    resource_type=self.resource_type,
                    resource_id=resource_id,
                )
                if self.metrics is not None:
                    self.metrics.record_state_dropped(self.resource_type)
            return state

    def update(
        self,
        resource_id: str,
        document: ResourceDocument,
        prior: ResourceDocument | None = None,
    ) -> ResourceDocument | None:
        """
        Apply a changed configuration to an existing resource.

        The full record is sent, not a diff. When a force-new field differs
        from ``prior`` the resource is destroyed and recreated instead. Without
        ``prior`` the current remote state is read and compared.

        Args:
            resource_id: Identity of the resource
            document: New desired configuration
            prior: Tracked state before the change

        Returns:
            Refreshed state (with a new identity after a replacement), or
            None if the resource vanished during the update

        Raises:
            NotFoundError: If no prior state is given and the resource does
                not exist
        """
        with self.track_operation(OPERATION_UPDATE, resource_id):
            self.schema.validate(document)

            if prior is None:
                prior = self._read(resource_id, None)
                if prior is None:
                    raise NotFoundError(
                        f"Cannot update non-existent {self.resource_type} {resource_id}"
                    )

            update_plan = plan(self.schema, prior, document)
            if update_plan.action is PlanAction.REPLACE:
                self.logger.info(
                    f"Replacing {self.resource_type} {resource_id}: "
                    f"force-new fields changed",
                    resource_type=self.resource_type,
                    resource_id=resource_id,
                    changed_fields=list(update_plan.replace_fields),
                )
                self._delete(resource_id)
                return self._create(document)

            desired = document.copy()
            desired.id = resource_id
            record = self.codec.decode(desired)
            self.remote_update(record)
            return self._read(resource_id, desired)

    def delete(self, resource_id: str) -> None:
        """
        Delete the resource. Deleting a resource that is already gone succeeds.

        Args:
            resource_id: Identity of the resource
        """
        with self.track_operation(OPERATION_DELETE, resource_id):
            self._delete(resource_id)

    def import_resource(self, resource_id: str) -> ResourceDocument:
        """
        Adopt an existing remote resource as tracked state.

        Every value the remote reports becomes set in the resulting document.

        Args:
            resource_id: Identity of the resource

        Returns:
            Tracked state for the resource

        Raises:
            NotFoundError: If the resource does not exist
        """
        with self.track_operation(OPERATION_IMPORT, resource_id):
            document = self._read(resource_id, None)
            if document is None:
                raise NotFoundError(
                    f"Cannot import non-existent {self.resource_type} {resource_id}"
                )
            return document

    # Internals shared by the public operations

    def _create(self, document: ResourceDocument) -> ResourceDocument:
        self.schema.validate(document)

        desired = document.copy()
        desired.id = None
        record = self.codec.decode(desired)

        created = self.remote_create(record)
        resource_id = getattr(created, "id", None)
        if not resource_id:
            raise TransportError(
                f"Remote did not assign an identity to the new {self.resource_type}",
                retryable=False,
            )

        self.logger.info(
            f"Created {self.resource_type} {resource_id}",
            resource_type=self.resource_type,
            resource_id=resource_id,
        )

        desired.id = resource_id
        state = self._read(resource_id, desired)
        if state is None:
            raise NotFoundError(
                f"{self.resource_type} {resource_id} disappeared right after creation"
            )
        return state

    def _read(
        self, resource_id: str, document: ResourceDocument | None
    ) -> ResourceDocument | None:
        try:
            record = self.remote_get(resource_id)
        except NotFoundError:
            return None

        return self.codec.encode(record, document)

    def _delete(self, resource_id: str) -> None:
        try:
            self.remote_delete(resource_id)
        except NotFoundError:
            self.logger.info(
                f"{self.resource_type} {resource_id} already absent",
                resource_type=self.resource_type,
                resource_id=resource_id,
            )

    @contextmanager
    def track_operation(
        self, operation: str, resource_id: str | None = None
    ) -> Iterator[None]:
        """
        Log, measure and annotate errors for one operation.

        Provider errors are re-raised unchanged apart from the operation
        context attached to them.
        """
        start_time = time.time()
        self.logger.log_operation_start(
            resource_type=self.resource_type,
            operation=operation,
            resource_id=resource_id,
        )

        tracker = (
            self.metrics.track_operation(self.resource_type, operation)
            if self.metrics is not None
            else nullcontext()
        )

        with tracker:
            try:
                yield
            except Exception as e:
                if isinstance(e, ProviderError):
                    e.with_context(operation, resource_id)
                self.logger.log_operation_error(
                    resource_type=self.resource_type,
                    operation=operation,
                    resource_id=resource_id,
                    error=e,
                    duration=time.time() - start_time,
                )
                raise

        self.logger.log_operation_success(
            resource_type=self.resource_type,
            operation=operation,
            resource_id=resource_id,
            duration=time.time() - start_time,
        )
