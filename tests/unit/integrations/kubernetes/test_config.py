"""Unit tests for Kubernetes configuration models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from acme_http_solver.integrations.kubernetes.config import KubernetesConfig


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesConfig:
    """Test KubernetesConfig validation and env overrides."""

    def test_defaults(self) -> None:
        config = KubernetesConfig()

        assert config.kubeconfig is None
        assert config.context is None
        assert config.request_timeout == 30
        assert config.retry_attempts == 3

    def test_kubeconfig_expands_home(self) -> None:
        """~ should be expanded in the kubeconfig path."""
        config = KubernetesConfig(kubeconfig="~/.kube/config")

        assert config.kubeconfig == str(Path.home() / ".kube" / "config")

    @pytest.mark.parametrize("timeout", [0, -5])
    def test_invalid_request_timeout(self, timeout: int) -> None:
        with pytest.raises(ValidationError, match="request_timeout must be positive"):
            KubernetesConfig(request_timeout=timeout)

    def test_invalid_retry_attempts(self) -> None:
        with pytest.raises(ValidationError, match="retry_attempts must be non-negative"):
            KubernetesConfig(retry_attempts=-1)

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            KubernetesConfig(namespace="default")  # type: ignore[call-arg]

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables should override base values."""
        monkeypatch.setenv("ACME_SOLVER_KUBECONFIG", "/etc/kube/config")
        monkeypatch.setenv("ACME_SOLVER_CONTEXT", "prod")
        monkeypatch.setenv("ACME_SOLVER_REQUEST_TIMEOUT", "12")

        config = KubernetesConfig.from_env({"context": "dev", "retry_attempts": 5})

        assert config.kubeconfig == "/etc/kube/config"
        assert config.context == "prod"
        assert config.request_timeout == 12
        assert config.retry_attempts == 5

    def test_from_env_does_not_mutate_base(self) -> None:
        base = {"context": "dev"}

        KubernetesConfig.from_env(base)

        assert base == {"context": "dev"}
