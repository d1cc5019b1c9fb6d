"""Contour HTTPProxy model and its generic object codec.

HTTPProxy is a CRD, so the API server hands it out as a plain ``dict``.
``HTTPProxy.to_k8s_object`` and ``HTTPProxy.from_k8s_object`` are the only
places that translate between that dict and the typed model.

Only the fields the solver writes are declared. Everything else a stored
spec carries (``virtualhost.tls``, ``routes[].pathRewritePolicy``, ...) is
kept as model extras, so comparing a decoded spec with a freshly built one
sees those keys as drift.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import Field, ValidationError

from acme_http_solver.integrations.kubernetes.exceptions import ConversionError
from acme_http_solver.integrations.kubernetes.models.base import (
    K8sModel,
    K8sOpenModel,
    ObjectMeta,
)

# projectcontour.io CRD coordinates
HTTPPROXY_GROUP = "projectcontour.io"
HTTPPROXY_VERSION = "v1"
HTTPPROXY_PLURAL = "httpproxies"
HTTPPROXY_KIND = "HTTPProxy"
HTTPPROXY_API_VERSION = f"{HTTPPROXY_GROUP}/{HTTPPROXY_VERSION}"


class MatchCondition(K8sOpenModel):
    """Request match condition of a route."""

    prefix: str | None = None


class Service(K8sOpenModel):
    """Upstream service a route forwards to."""

    name: str
    port: int


class Route(K8sOpenModel):
    """A single HTTPProxy route."""

    conditions: tuple[MatchCondition, ...] = ()
    services: tuple[Service, ...] = ()
    permit_insecure: bool = False


class VirtualHost(K8sOpenModel):
    """Root virtual host of an HTTPProxy."""

    fqdn: str


class HTTPProxySpec(K8sOpenModel):
    """Desired routing configuration of an HTTPProxy.

    Equality is structural, includes undeclared keys and is order-sensitive
    for routes, conditions and services.
    """

    virtualhost: VirtualHost | None = None
    routes: tuple[Route, ...] = ()


class HTTPProxy(K8sModel):
    """A ``projectcontour.io/v1`` HTTPProxy."""

    api_version: Literal["projectcontour.io/v1"] = HTTPPROXY_API_VERSION
    kind: Literal["HTTPProxy"] = HTTPPROXY_KIND
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)
    spec: HTTPProxySpec = Field(default_factory=HTTPProxySpec)
    status: dict[str, Any] | None = None

    @property
    def name(self) -> str | None:
        return self.metadata.name

    def to_k8s_object(self) -> dict[str, Any]:
        """Encode into the generic dict form accepted by ``CustomObjectsApi``.

        Only keys that were set, either on construction or by the decoded
        object, are written. Explicit ``null`` values from the server are
        sent back as they came.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        data["apiVersion"] = HTTPPROXY_API_VERSION
        data["kind"] = HTTPPROXY_KIND
        return data

    @classmethod
    def from_k8s_object(cls, obj: Mapping[str, Any]) -> HTTPProxy:
        """Decode a generic HTTPProxy dict.

        Raises:
            ConversionError: If the object is not an HTTPProxy or its fields
                cannot be mapped onto the typed model.
        """
        if not isinstance(obj, Mapping):
            raise ConversionError(
                f"expected a mapping, got {type(obj).__name__}", kind=HTTPPROXY_KIND
            )
        try:
            return cls.model_validate(obj)
        except ValidationError as e:
            raise ConversionError(
                f"cannot convert object to HTTPProxy: {e.error_count()} invalid field(s)",
                kind=HTTPPROXY_KIND,
                errors=e.errors(include_url=False, include_context=False),
            ) from e
