"""Typed models for the Kubernetes resources the solver reads and writes."""

from acme_http_solver.integrations.kubernetes.models.base import (
    K8sModel,
    K8sOpenModel,
    ObjectMeta,
    OwnerReference,
)
from acme_http_solver.integrations.kubernetes.models.challenge import (
    Challenge,
    challenge_labels,
    label_selector,
)
from acme_http_solver.integrations.kubernetes.models.httpproxy import (
    HTTPProxy,
    HTTPProxySpec,
    MatchCondition,
    Route,
    Service,
    VirtualHost,
)

__all__ = [
    "Challenge",
    "HTTPProxy",
    "HTTPProxySpec",
    "K8sModel",
    "K8sOpenModel",
    "MatchCondition",
    "ObjectMeta",
    "OwnerReference",
    "Route",
    "Service",
    "VirtualHost",
    "challenge_labels",
    "label_selector",
]
