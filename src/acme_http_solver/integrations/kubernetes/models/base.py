"""Base models shared by the typed Kubernetes resources.

Custom resources are exchanged with the API server as plain ``dict`` objects
using camelCase keys. The models here map those keys onto snake_case fields
through a camelCase alias generator and compare by value.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class K8sModel(BaseModel):
    """Immutable value model using Kubernetes camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class K8sOpenModel(K8sModel):
    """Value model that keeps keys it does not declare.

    Undeclared keys are stored as extras under their wire name. They take
    part in equality and are sent back unchanged on encode.
    """

    model_config = ConfigDict(extra="allow")


class OwnerReference(K8sModel):
    """Kubernetes owner reference.

    Recorded on dependents for the garbage collector; never dereferenced.
    """

    api_version: str
    kind: str
    name: str
    uid: str
    controller: bool | None = None
    block_owner_deletion: bool | None = None


class ObjectMeta(K8sOpenModel):
    """Kubernetes object metadata.

    Server-populated keys without a dedicated field (``managedFields``,
    ``generation``, ...) are kept as extras so a read-modify-write cycle
    sends them back untouched.
    """

    name: str | None = Field(default=None, description="Resource name")
    generate_name: str | None = Field(default=None, description="Server-side name prefix")
    namespace: str | None = Field(default=None, description="Resource namespace")
    uid: str | None = Field(default=None, description="Kubernetes UID")
    resource_version: str | None = Field(
        default=None, description="Optimistic concurrency token"
    )
    creation_timestamp: str | None = Field(default=None, description="Creation time")
    labels: dict[str, str] = Field(default_factory=dict, description="Resource labels")
    annotations: dict[str, str] = Field(default_factory=dict, description="Resource annotations")
    owner_references: tuple[OwnerReference, ...] = Field(
        default=(), description="Owning objects"
    )
