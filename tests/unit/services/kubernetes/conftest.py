"""Shared fixtures for Kubernetes service tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from acme_http_solver.integrations.kubernetes.client import KubernetesClient


@pytest.fixture
def mock_k8s_client() -> MagicMock:
    """Create a mock Kubernetes client.

    ``custom_objects`` is an auto-created sub-mock; exceptions are translated
    with the real ``KubernetesClient.translate_api_exception``.
    """
    mock_client = MagicMock()
    mock_client.request_timeout = 30
    mock_client.translate_api_exception.side_effect = KubernetesClient.translate_api_exception
    return mock_client
