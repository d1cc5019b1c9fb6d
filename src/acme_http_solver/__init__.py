"""ACME HTTP-01 challenge solver for Contour HTTPProxy resources."""

from acme_http_solver.integrations.kubernetes.exceptions import (
    AmbiguousStateError,
    ConversionError,
    KubernetesError,
)
from acme_http_solver.integrations.kubernetes.models import Challenge, HTTPProxy, HTTPProxySpec
from acme_http_solver.services.kubernetes import (
    BackendTarget,
    HTTPProxySolver,
    build_httpproxy_spec,
)

__all__ = [
    "AmbiguousStateError",
    "BackendTarget",
    "Challenge",
    "ConversionError",
    "HTTPProxy",
    "HTTPProxySolver",
    "HTTPProxySpec",
    "KubernetesError",
    "build_httpproxy_spec",
]
