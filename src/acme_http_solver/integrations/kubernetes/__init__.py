"""Kubernetes integration - API client, configuration and exceptions."""

from acme_http_solver.integrations.kubernetes.client import KubernetesClient
from acme_http_solver.integrations.kubernetes.config import KubernetesConfig
from acme_http_solver.integrations.kubernetes.exceptions import (
    AmbiguousStateError,
    ConversionError,
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesValidationError,
)

__all__ = [
    "AmbiguousStateError",
    "ConversionError",
    "KubernetesAuthError",
    "KubernetesClient",
    "KubernetesConfig",
    "KubernetesConflictError",
    "KubernetesConnectionError",
    "KubernetesError",
    "KubernetesNotFoundError",
    "KubernetesValidationError",
]
