"""Namespaced custom resource store.

Exposes list/create/update/delete over generic ``dict`` objects for a single
CRD through the Kubernetes ``CustomObjectsApi``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from acme_http_solver.integrations.kubernetes.models.httpproxy import (
    HTTPPROXY_GROUP,
    HTTPPROXY_KIND,
    HTTPPROXY_PLURAL,
    HTTPPROXY_VERSION,
)
from acme_http_solver.services.kubernetes.base import K8sBaseManager

if TYPE_CHECKING:
    from acme_http_solver.integrations.kubernetes.client import KubernetesClient


class ResourceStore(Protocol):
    """Namespaced CRUD over generic objects of one resource type.

    Every method may raise ``KubernetesError``.
    """

    def list_objects(self, namespace: str, label_selector: str) -> list[dict[str, Any]]: ...

    def create_object(self, namespace: str, obj: dict[str, Any]) -> dict[str, Any]: ...

    def update_object(self, namespace: str, obj: dict[str, Any]) -> dict[str, Any]: ...

    def delete_object(self, namespace: str, name: str) -> None: ...


class CustomResourceStore(K8sBaseManager):
    """``ResourceStore`` backed by ``CustomObjectsApi`` for one CRD.

    Updates send the object's ``resourceVersion``, so the API server rejects
    writes based on a stale read with a 409 (``KubernetesConflictError``).
    """

    _entity_name = "custom_resource"

    @classmethod
    def for_httpproxies(cls, client: KubernetesClient) -> CustomResourceStore:
        """Create a store bound to ``projectcontour.io/v1`` HTTPProxies."""
        return cls(
            client,
            group=HTTPPROXY_GROUP,
            version=HTTPPROXY_VERSION,
            plural=HTTPPROXY_PLURAL,
            kind=HTTPPROXY_KIND,
        )

    def list_objects(self, namespace: str, label_selector: str) -> list[dict[str, Any]]:
        """List objects in a namespace matching a label selector.

        Args:
            namespace: Target namespace.
            label_selector: Equality-based label selector.

        Returns:
            Generic objects in server order.
        """
        self._log.debug("listing_objects", namespace=namespace, label_selector=label_selector)
        result = self._call_custom_objects(
            "list_namespaced_custom_object", namespace, label_selector=label_selector
        )
        items: list[dict[str, Any]] = result.get("items", [])
        self._log.debug("listed_objects", count=len(items), namespace=namespace)
        return items

    def create_object(self, namespace: str, obj: dict[str, Any]) -> dict[str, Any]:
        """Create an object.

        Args:
            namespace: Target namespace.
            obj: Generic object body; may use ``metadata.generateName``.

        Returns:
            The object as stored by the server.
        """
        metadata: dict[str, Any] = obj.get("metadata", {})
        display_name = metadata.get("name") or metadata.get("generateName")
        self._log.debug("creating_object", name=display_name, namespace=namespace)
        result: dict[str, Any] = self._call_custom_objects(
            "create_namespaced_custom_object", namespace, obj, name=display_name
        )
        self._log.info(
            "created_object",
            name=result.get("metadata", {}).get("name"),
            namespace=namespace,
        )
        return result

    def update_object(self, namespace: str, obj: dict[str, Any]) -> dict[str, Any]:
        """Replace an existing object.

        Args:
            namespace: Target namespace.
            obj: Full generic object including ``metadata.name`` and
                ``metadata.resourceVersion``.

        Returns:
            The object as stored by the server.
        """
        name = obj.get("metadata", {}).get("name")
        self._log.debug("updating_object", name=name, namespace=namespace)
        result: dict[str, Any] = self._call_custom_objects(
            "replace_namespaced_custom_object", namespace, name, obj, name=name
        )
        self._log.info("updated_object", name=name, namespace=namespace)
        return result

    def delete_object(self, namespace: str, name: str) -> None:
        """Delete an object by name."""
        self._log.debug("deleting_object", name=name, namespace=namespace)
        self._call_custom_objects("delete_namespaced_custom_object", namespace, name, name=name)
        self._log.info("deleted_object", name=name, namespace=namespace)
