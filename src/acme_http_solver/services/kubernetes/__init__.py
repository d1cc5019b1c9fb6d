"""Kubernetes service module.

Resource store and the HTTPProxy based HTTP-01 solver.
"""

from acme_http_solver.services.kubernetes.custom_resources import (
    CustomResourceStore,
    ResourceStore,
)
from acme_http_solver.services.kubernetes.httpproxy_solver import (
    BackendTarget,
    HTTPProxySolver,
    build_httpproxy_spec,
)

__all__ = [
    "BackendTarget",
    "CustomResourceStore",
    "HTTPProxySolver",
    "ResourceStore",
    "build_httpproxy_spec",
]
