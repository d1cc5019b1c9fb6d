"""Cert-manager ACME Challenge model.

The Challenge is read-only input: the solver derives correlation labels and
an owner reference from it but never writes it back.
"""

from __future__ import annotations

import zlib
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from acme_http_solver.integrations.kubernetes.models.base import OwnerReference

# acme.cert-manager.io CRD coordinates
ACME_GROUP = "acme.cert-manager.io"
ACME_VERSION = "v1"
CHALLENGE_KIND = "Challenge"
CHALLENGE_API_VERSION = f"{ACME_GROUP}/{ACME_VERSION}"

# Correlation label keys shared with the other HTTP-01 solver resources
DOMAIN_LABEL_KEY = "acme.cert-manager.io/http-domain"
TOKEN_LABEL_KEY = "acme.cert-manager.io/http-token"
SOLVER_IDENTIFICATION_LABEL_KEY = "acme.cert-manager.io/http01-solver"


class Challenge(BaseModel):
    """An ACME HTTP-01 challenge awaiting presentation."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(default="", description="Challenge name")
    namespace: str = Field(description="Challenge namespace")
    uid: str | None = Field(default=None, description="Kubernetes UID")
    dns_name: str = Field(description="Domain being validated")
    token: str = Field(description="ACME challenge token")
    solver: dict[str, Any] = Field(default_factory=dict, description="Solver configuration")

    @classmethod
    def from_k8s_object(cls, obj: dict[str, Any]) -> Challenge:
        """Create from a cert-manager ACME Challenge CRD dict."""
        metadata: dict[str, Any] = obj.get("metadata", {})
        spec: dict[str, Any] = obj.get("spec", {})

        return cls(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            uid=metadata.get("uid"),
            dns_name=spec.get("dnsName", ""),
            token=spec.get("token", ""),
            solver=spec.get("solver") or {},
        )

    def controller_ref(self) -> OwnerReference:
        """Build the controller owner reference pointing at this challenge."""
        return OwnerReference(
            api_version=CHALLENGE_API_VERSION,
            kind=CHALLENGE_KIND,
            name=self.name,
            uid=self.uid or "",
            controller=True,
            block_owner_deletion=True,
        )


def _checksum(value: str) -> str:
    return str(zlib.adler32(value.encode("utf-8")))


def challenge_labels(challenge: Challenge) -> dict[str, str]:
    """Labels correlating solver resources with a challenge.

    Domain and token are hashed because label values are limited to 63
    characters and a restricted alphabet.
    """
    return {
        DOMAIN_LABEL_KEY: _checksum(challenge.dns_name),
        TOKEN_LABEL_KEY: _checksum(challenge.token),
        SOLVER_IDENTIFICATION_LABEL_KEY: "true",
    }


def label_selector(labels: dict[str, str]) -> str:
    """Render an equality-based label selector, sorted by key."""
    return ",".join(f"{key}={labels[key]}" for key in sorted(labels))
