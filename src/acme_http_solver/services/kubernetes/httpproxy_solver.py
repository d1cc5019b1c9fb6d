"""HTTP-01 challenge solver backed by Contour HTTPProxy resources.

For every ACME Challenge exactly one HTTPProxy routes
``/.well-known/acme-challenge/<token>`` on the challenged domain to the solver
Service. ``HTTPProxySolver.ensure_httpproxy`` converges the cluster to that
state: it creates the proxy when absent, leaves it alone when it already
matches, rewrites its spec when it has drifted, and removes duplicates.

Deletion of the proxy is left to the garbage collector through the owner
reference on the Challenge.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from acme_http_solver.core.config.models import ACME_SOLVER_LISTEN_PORT, SolverConfig
from acme_http_solver.integrations.kubernetes.client import KubernetesClient
from acme_http_solver.integrations.kubernetes.exceptions import AmbiguousStateError
from acme_http_solver.integrations.kubernetes.models.base import ObjectMeta
from acme_http_solver.integrations.kubernetes.models.challenge import (
    Challenge,
    challenge_labels,
    label_selector,
)
from acme_http_solver.integrations.kubernetes.models.httpproxy import (
    HTTPPROXY_KIND,
    HTTPProxy,
    HTTPProxySpec,
    MatchCondition,
    Route,
    Service,
    VirtualHost,
)
from acme_http_solver.services.kubernetes.custom_resources import CustomResourceStore

if TYPE_CHECKING:
    from acme_http_solver.services.kubernetes.custom_resources import ResourceStore

logger = structlog.get_logger()

ACME_CHALLENGE_PATH_PREFIX = "/.well-known/acme-challenge/"
INGRESS_CLASS_ANNOTATION = "kubernetes.io/ingress.class"


class BackendTarget(BaseModel):
    """The solver Service a challenge route forwards to."""

    model_config = ConfigDict(frozen=True)

    service_name: str = Field(description="Solver Service name")
    port: int = Field(default=ACME_SOLVER_LISTEN_PORT, description="Solver Service port")


def build_httpproxy_spec(challenge: Challenge, target: BackendTarget) -> HTTPProxySpec:
    """Build the desired HTTPProxy spec for a challenge.

    Pure and deterministic: identical inputs always yield equal specs, which
    is what makes ``==`` usable for drift detection.
    """
    prefix = f"{ACME_CHALLENGE_PATH_PREFIX}{challenge.token}"
    return HTTPProxySpec(
        virtualhost=VirtualHost(fqdn=challenge.dns_name),
        routes=(
            Route(
                conditions=(MatchCondition(prefix=prefix),),
                services=(Service(name=target.service_name, port=target.port),),
                permit_insecure=True,
            ),
        ),
    )


def _survivor_sort_key(obj: dict[str, Any]) -> tuple[bool, str, str]:
    # Oldest first; objects without a timestamp last; name breaks ties.
    metadata: dict[str, Any] = obj.get("metadata") or {}
    created = metadata.get("creationTimestamp")
    return (created is None, str(created or ""), metadata.get("name") or "")


class HTTPProxySolver:
    """Keeps exactly one up-to-date HTTPProxy per ACME Challenge.

    The solver holds no state between calls and takes no locks. Concurrent
    calls for the same challenge may both create a proxy; the next call
    detects the duplicate and deletes it.

    Example:
        >>> solver = HTTPProxySolver.from_config(load_config())
        >>> target = solver.backend_for("cm-acme-http-solver-abcde")
        >>> proxy = solver.ensure_httpproxy(challenge, target)
    """

    _entity_name = "httpproxy"

    def __init__(self, store: ResourceStore, config: SolverConfig | None = None) -> None:
        """Initialize the solver.

        Args:
            store: Store holding HTTPProxy objects.
            config: Solver configuration, defaults when omitted.
        """
        self._store = store
        self._config = config or SolverConfig()
        self._log = logger.bind(entity=self._entity_name)

    @classmethod
    def from_config(
        cls,
        config: SolverConfig,
        client: KubernetesClient | None = None,
    ) -> HTTPProxySolver:
        """Create a solver talking to the cluster described by ``config``.

        Args:
            config: Solver configuration.
            client: Existing client to reuse instead of building one.
        """
        if client is None:
            client = KubernetesClient(config.kubernetes)
        return cls(CustomResourceStore.for_httpproxies(client), config)

    def backend_for(self, service_name: str) -> BackendTarget:
        """Backend target for a solver Service on the configured listen port."""
        return BackendTarget(service_name=service_name, port=self._config.listen_port)

    # =========================================================================
    # Convergence
    # =========================================================================

    def ensure_httpproxy(self, challenge: Challenge, target: BackendTarget) -> HTTPProxy:
        """Ensure a single HTTPProxy matching the challenge exists.

        Args:
            challenge: Challenge being solved.
            target: Solver Service the route forwards to.

        Returns:
            The created, unchanged, or updated HTTPProxy.

        Raises:
            KubernetesError: If a store call fails, including update conflicts.
            ConversionError: If a stored object cannot be decoded.
            AmbiguousStateError: If duplicates were found (and removed).
        """
        log = self._log.bind(challenge=challenge.name, namespace=challenge.namespace)

        existing = self.get_httpproxy(challenge)
        if existing is None:
            log.info("creating_httpproxy")
            created = self._create_httpproxy(challenge, target)
            log.info("created_httpproxy", name=created.name)
            return created

        log.debug("found_httpproxy", name=existing.name)
        return self._check_and_update_httpproxy(challenge, target, existing)

    def get_httpproxy(self, challenge: Challenge) -> HTTPProxy | None:
        """Find the HTTPProxy belonging to a challenge.

        When several match, the oldest is kept, the others are deleted and
        ``AmbiguousStateError`` is raised so the caller re-reads.

        Returns:
            The HTTPProxy, or None if none exists yet.
        """
        namespace = challenge.namespace
        items = self._store.list_objects(namespace, label_selector(challenge_labels(challenge)))

        if not items:
            return None
        if len(items) == 1:
            return HTTPProxy.from_k8s_object(items[0])

        survivor, *duplicates = sorted(items, key=_survivor_sort_key)
        survivor_name = (survivor.get("metadata") or {}).get("name")
        deleted: list[str] = []
        for duplicate in duplicates:
            name = (duplicate.get("metadata") or {}).get("name", "")
            self._log.info(
                "deleting_duplicate_httpproxy",
                name=name,
                survivor=survivor_name,
                namespace=namespace,
            )
            self._store.delete_object(namespace, name)
            deleted.append(name)

        raise AmbiguousStateError(
            HTTPPROXY_KIND,
            namespace,
            count=len(items),
            survivor=survivor_name,
            deleted=deleted,
        )

    def _create_httpproxy(self, challenge: Challenge, target: BackendTarget) -> HTTPProxy:
        proxy = HTTPProxy(
            metadata=ObjectMeta(
                generate_name=self._config.generate_name,
                namespace=challenge.namespace,
                annotations={INGRESS_CLASS_ANNOTATION: self._config.ingress_class},
                labels=challenge_labels(challenge),
                owner_references=(challenge.controller_ref(),),
            ),
            spec=build_httpproxy_spec(challenge, target),
        )
        result = self._store.create_object(challenge.namespace, proxy.to_k8s_object())
        return HTTPProxy.from_k8s_object(result)

    def _check_and_update_httpproxy(
        self,
        challenge: Challenge,
        target: BackendTarget,
        existing: HTTPProxy,
    ) -> HTTPProxy:
        expected_spec = build_httpproxy_spec(challenge, target)
        if existing.spec == expected_spec:
            return existing

        self._log.info("updating_httpproxy", name=existing.name, namespace=challenge.namespace)
        updated = existing.model_copy(update={"spec": expected_spec})
        result = self._store.update_object(challenge.namespace, updated.to_k8s_object())
        return HTTPProxy.from_k8s_object(result)

    # =========================================================================
    # Cleanup
    # =========================================================================

    def cleanup_httpproxy(self, challenge: Challenge) -> None:
        """Nothing to do; the garbage collector deletes the HTTPProxy with its Challenge."""
        self._log.debug("cleanup_delegated_to_gc", challenge=challenge.name)
