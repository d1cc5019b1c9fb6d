"""Unit tests for K8sBaseManager."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from kubernetes.client import ApiException

from acme_http_solver.integrations.kubernetes.exceptions import (
    KubernetesConflictError,
    KubernetesNotFoundError,
)
from acme_http_solver.services.kubernetes.base import K8sBaseManager


class _WidgetManager(K8sBaseManager):
    _entity_name = "widget"


@pytest.fixture
def manager(mock_k8s_client: MagicMock) -> _WidgetManager:
    """Create a manager bound to a made-up CRD."""
    return _WidgetManager(
        mock_k8s_client,
        group="example.io",
        version="v1alpha1",
        plural="widgets",
        kind="Widget",
    )


@pytest.mark.unit
@pytest.mark.kubernetes
class TestK8sBaseManager:
    """Tests for the shared custom resource manager base."""

    def test_exposes_coordinates(self, manager: _WidgetManager) -> None:
        assert manager.kind == "Widget"
        assert manager.api_version == "example.io/v1alpha1"

    def test_call_forwards_coordinates_and_timeout(
        self,
        manager: _WidgetManager,
        mock_k8s_client: MagicMock,
    ) -> None:
        """_call_custom_objects should prefix the CRD coordinates and add the timeout."""
        mock_k8s_client.custom_objects.get_namespaced_custom_object.return_value = {"ok": 1}

        result = manager._call_custom_objects(
            "get_namespaced_custom_object", "ns1", "w1", name="w1"
        )

        assert result == {"ok": 1}
        mock_k8s_client.custom_objects.get_namespaced_custom_object.assert_called_once_with(
            "example.io", "v1alpha1", "ns1", "widgets", "w1", _request_timeout=30
        )

    def test_call_passes_keyword_arguments(
        self,
        manager: _WidgetManager,
        mock_k8s_client: MagicMock,
    ) -> None:
        mock_k8s_client.request_timeout = 5

        manager._call_custom_objects("list_namespaced_custom_object", "ns1", label_selector="a=b")

        mock_k8s_client.custom_objects.list_namespaced_custom_object.assert_called_once_with(
            "example.io", "v1alpha1", "ns1", "widgets", label_selector="a=b", _request_timeout=5
        )

    def test_call_translates_errors_with_kind(
        self,
        manager: _WidgetManager,
        mock_k8s_client: MagicMock,
    ) -> None:
        """API errors should be translated using the bound kind and chained."""
        original = ApiException(status=409, reason="Conflict")
        mock_k8s_client.custom_objects.replace_namespaced_custom_object.side_effect = original

        with pytest.raises(KubernetesConflictError) as exc_info:
            manager._call_custom_objects(
                "replace_namespaced_custom_object", "ns1", "w1", {}, name="w1"
            )

        assert exc_info.value.__cause__ is original
        assert exc_info.value.resource_type == "Widget"
        assert exc_info.value.resource_name == "w1"
        assert exc_info.value.namespace == "ns1"

    def test_handle_api_error_translates(
        self,
        manager: _WidgetManager,
        mock_k8s_client: MagicMock,
    ) -> None:
        original = ApiException(status=404, reason="Not Found")

        with pytest.raises(KubernetesNotFoundError) as exc_info:
            manager._handle_api_error(original, "Widget", "w1", "ns1")

        assert exc_info.value.__cause__ is original
        mock_k8s_client.translate_api_exception.assert_called_once_with(
            original, resource_type="Widget", resource_name="w1", namespace="ns1"
        )
