"""Kubernetes API client wrapper.

Wraps the official kubernetes Python client with kubeconfig/in-cluster
loading, lazy API group initialization, a start-up connectivity probe and
consistent error translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from acme_http_solver.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesValidationError,
)

if TYPE_CHECKING:
    from kubernetes.client import CustomObjectsApi, VersionApi

    from acme_http_solver.integrations.kubernetes.config import KubernetesConfig

logger = structlog.get_logger()


class KubernetesClient:
    """Kubernetes API client.

    Wraps the official kubernetes Python client with:
    - kubeconfig loading with in-cluster fallback
    - Lazy API group initialization
    - A tenacity-backed reachability probe for start-up
    - Consistent error translation to custom exceptions
    - Context manager support

    Example:
        ```python
        from acme_http_solver.integrations.kubernetes import KubernetesClient
        from acme_http_solver.integrations.kubernetes.config import KubernetesConfig

        with KubernetesClient(KubernetesConfig.from_env()) as client:
            client.wait_until_reachable()
            proxies = client.custom_objects.list_namespaced_custom_object(
                "projectcontour.io", "v1", "default", "httpproxies"
            )
        ```
    """

    def __init__(self, config: KubernetesConfig) -> None:
        """Initialize Kubernetes client from config.

        Args:
            config: Kubernetes connection configuration.
        """
        self._config = config
        self._retries = config.retry_attempts
        self._current_context: str | None = None

        self._custom_objects: CustomObjectsApi | None = None
        self._version_api: VersionApi | None = None

        self._load_config()

        logger.info("Kubernetes client initialized", context=self._current_context)

    def _load_config(self) -> None:
        """Load Kubernetes configuration from kubeconfig or in-cluster."""
        from kubernetes import config
        from kubernetes.config import ConfigException

        try:
            config.load_kube_config(
                config_file=self._config.kubeconfig,
                context=self._config.context,
            )
            self._current_context = self._config.context
            logger.debug(
                "loaded_kubeconfig",
                context=self._config.context,
                kubeconfig=self._config.kubeconfig,
            )
        except ConfigException:
            try:
                config.load_incluster_config()
                self._current_context = "in-cluster"
                logger.debug("loaded_incluster_config")
            except ConfigException as e:
                raise KubernetesConnectionError(
                    message="Cannot load Kubernetes configuration. "
                    "Ensure kubeconfig exists or running inside a cluster.",
                    original_error=e,
                ) from e

        self._invalidate_api_cache()

    def _invalidate_api_cache(self) -> None:
        """Clear cached API group instances."""
        self._custom_objects = None
        self._version_api = None

    # =========================================================================
    # Lazy API Group Accessors
    # =========================================================================

    @property
    def custom_objects(self) -> CustomObjectsApi:
        """Get CustomObjectsApi instance (CRDs such as HTTPProxy and Challenge)."""
        if self._custom_objects is None:
            from kubernetes.client import CustomObjectsApi

            self._custom_objects = CustomObjectsApi()
        return self._custom_objects

    @property
    def version_api(self) -> VersionApi:
        """Get VersionApi instance for cluster version info."""
        if self._version_api is None:
            from kubernetes.client import VersionApi

            self._version_api = VersionApi()
        return self._version_api

    def get_current_context(self) -> str:
        """Get the current active context name.

        Returns:
            The current context name, 'in-cluster' inside a pod, or 'default'
            when the kubeconfig's current context was used.
        """
        return self._current_context or "default"

    # =========================================================================
    # Error Translation
    # =========================================================================

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Translate a kubernetes ApiException to a custom exception.

        Args:
            e: The original exception.
            resource_type: Type of resource being operated on.
            resource_name: Name of the resource.
            namespace: Namespace of the resource.

        Returns:
            An appropriate KubernetesError subclass.
        """
        from kubernetes.client import ApiException
        from urllib3.exceptions import HTTPError

        if isinstance(e, KubernetesError):
            return e

        if isinstance(e, HTTPError):
            return KubernetesConnectionError(
                message=f"Kubernetes API request failed: {e}",
                original_error=e,
            )

        if not isinstance(e, ApiException):
            return KubernetesError(
                message=str(e),
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        status = e.status

        if status in (401, 403):
            return KubernetesAuthError(
                message=e.reason or "Authentication/authorization failed",
                status_code=status,
                reason=e.reason,
            )

        if status == 404:
            return KubernetesNotFoundError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status == 409:
            return KubernetesConflictError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status in (400, 422):
            return KubernetesValidationError(
                message=e.reason or "Validation failed",
                status_code=status,
            )

        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {status}",
            status_code=status,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )

    # =========================================================================
    # Connection Check
    # =========================================================================

    def make_retry_decorator(self) -> Any:
        """Create a retry decorator for transient connection errors.

        Returns:
            A tenacity retry decorator configured with exponential backoff.
        """
        return retry(
            retry=retry_if_exception_type(KubernetesConnectionError),
            stop=stop_after_attempt(max(self._retries, 1)),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )

    def get_cluster_version(self) -> str:
        """Get the Kubernetes cluster version string.

        Returns:
            Kubernetes version (e.g., "v1.28").

        Raises:
            KubernetesConnectionError: If the cluster is unreachable.
        """
        try:
            version_info = self.version_api.get_code(_request_timeout=self.request_timeout)
            return f"v{version_info.major}.{version_info.minor}"
        except Exception as e:
            raise KubernetesConnectionError(
                message="Failed to get cluster version",
                original_error=e,
            ) from e

    def wait_until_reachable(self) -> str:
        """Block until the API server answers, retrying with backoff.

        Only meant for process start-up; reconciliation calls never retry.

        Returns:
            The cluster version string.

        Raises:
            KubernetesConnectionError: If the server is still unreachable
                after the configured number of attempts.
        """
        probe = self.make_retry_decorator()(self.get_cluster_version)
        version: str = probe()
        logger.info("cluster_reachable", version=version, context=self.get_current_context())
        return version

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def request_timeout(self) -> int:
        """Per-request timeout forwarded to every API call."""
        return self._config.request_timeout

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the client and release resources."""
        self._invalidate_api_cache()
        logger.debug("Kubernetes client closed")

    def __enter__(self) -> KubernetesClient:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
