"""Base manager for namespaced custom resources.

Binds one CRD (group, version, plural, kind) to a ``KubernetesClient`` and
routes every ``CustomObjectsApi`` call through a single helper that applies
the configured request timeout and translates API errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

import structlog

if TYPE_CHECKING:
    from acme_http_solver.integrations.kubernetes.client import KubernetesClient

logger = structlog.get_logger()


class K8sBaseManager:
    """Base class for managers of a single namespaced custom resource type.

    Subclasses set ``_entity_name`` for structured log context and call
    ``_call_custom_objects`` instead of using ``CustomObjectsApi`` directly.

    Example:
        >>> class CustomResourceStore(K8sBaseManager):
        ...     _entity_name = "custom_resource"
        >>> store = CustomResourceStore(
        ...     client, group="projectcontour.io", version="v1",
        ...     plural="httpproxies", kind="HTTPProxy",
        ... )
    """

    _entity_name: str = ""

    def __init__(
        self,
        client: KubernetesClient,
        *,
        group: str,
        version: str,
        plural: str,
        kind: str,
    ) -> None:
        """Initialize the manager.

        Args:
            client: Kubernetes API client instance.
            group: API group of the CRD.
            version: API version of the CRD.
            plural: Plural resource name of the CRD.
            kind: Kind of the CRD, used for logging and errors.
        """
        self._client = client
        self._group = group
        self._version = version
        self._plural = plural
        self._kind = kind
        self._log = logger.bind(entity=self._entity_name, kind=kind)

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def api_version(self) -> str:
        return f"{self._group}/{self._version}"

    def _call_custom_objects(
        self,
        method: str,
        namespace: str,
        *args: Any,
        name: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Invoke a namespaced ``CustomObjectsApi`` method for this resource.

        The CRD coordinates and namespace are passed first, followed by
        ``args``. The client's request timeout is always forwarded.

        Args:
            method: ``CustomObjectsApi`` method name, e.g.
                ``"list_namespaced_custom_object"``.
            namespace: Target namespace.
            *args: Positional arguments following the plural name.
            name: Resource name reported in translated errors.
            **kwargs: Additional keyword arguments for the API call.

        Returns:
            The API response.

        Raises:
            KubernetesError: If the call fails.
        """
        api_call = getattr(self._client.custom_objects, method)
        try:
            return api_call(
                self._group,
                self._version,
                namespace,
                self._plural,
                *args,
                _request_timeout=self._client.request_timeout,
                **kwargs,
            )
        except Exception as e:
            self._handle_api_error(e, self._kind, name, namespace)

    def _handle_api_error(
        self,
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> NoReturn:
        """Translate a Kubernetes API exception and re-raise.

        Raises:
            KubernetesError: Always raises an appropriate subclass.
        """
        raise self._client.translate_api_exception(
            e,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        ) from e
