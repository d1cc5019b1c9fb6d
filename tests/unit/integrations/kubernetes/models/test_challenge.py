"""Unit tests for the Challenge model and correlation labels."""

from __future__ import annotations

import zlib

import pytest

from acme_http_solver.integrations.kubernetes.models.base import OwnerReference
from acme_http_solver.integrations.kubernetes.models.challenge import (
    DOMAIN_LABEL_KEY,
    SOLVER_IDENTIFICATION_LABEL_KEY,
    TOKEN_LABEL_KEY,
    Challenge,
    challenge_labels,
    label_selector,
)

SAMPLE_CHALLENGE = {
    "apiVersion": "acme.cert-manager.io/v1",
    "kind": "Challenge",
    "metadata": {
        "name": "my-tls-1-12345-0",
        "namespace": "default",
        "uid": "uid-ch-123",
        "creationTimestamp": "2026-01-01T00:00:00Z",
    },
    "spec": {
        "type": "HTTP-01",
        "dnsName": "example.com",
        "token": "tok123",
        "key": "tok123.thumbprint",
        "url": "https://acme.example/chall/1",
        "solver": {"http01": {"httpProxy": {}}},
        "issuerRef": {"name": "letsencrypt-prod", "kind": "ClusterIssuer"},
    },
    "status": {"state": "pending", "presented": False, "processing": True},
}


@pytest.mark.unit
@pytest.mark.kubernetes
class TestChallenge:
    """Tests for Challenge.from_k8s_object and controller_ref."""

    def test_from_k8s_object(self) -> None:
        """Should read identity, domain, token and solver."""
        challenge = Challenge.from_k8s_object(SAMPLE_CHALLENGE)

        assert challenge.name == "my-tls-1-12345-0"
        assert challenge.namespace == "default"
        assert challenge.uid == "uid-ch-123"
        assert challenge.dns_name == "example.com"
        assert challenge.token == "tok123"
        assert challenge.solver == {"http01": {"httpProxy": {}}}

    def test_from_k8s_object_minimal(self) -> None:
        """Missing fields should fall back to empty values."""
        challenge = Challenge.from_k8s_object({})

        assert challenge.name == ""
        assert challenge.uid is None
        assert challenge.solver == {}

    def test_controller_ref(self) -> None:
        """Should build a blocking controller reference to the challenge."""
        ref = Challenge.from_k8s_object(SAMPLE_CHALLENGE).controller_ref()

        assert ref == OwnerReference(
            api_version="acme.cert-manager.io/v1",
            kind="Challenge",
            name="my-tls-1-12345-0",
            uid="uid-ch-123",
            controller=True,
            block_owner_deletion=True,
        )

    def test_challenge_is_immutable(self) -> None:
        challenge = Challenge.from_k8s_object(SAMPLE_CHALLENGE)

        with pytest.raises(ValueError):
            challenge.token = "other"  # type: ignore[misc]


@pytest.mark.unit
@pytest.mark.kubernetes
class TestChallengeLabels:
    """Tests for challenge_labels and label_selector."""

    def test_labels_hash_domain_and_token(self) -> None:
        """Labels should carry adler32 checksums of domain and token."""
        labels = challenge_labels(Challenge.from_k8s_object(SAMPLE_CHALLENGE))

        assert labels == {
            DOMAIN_LABEL_KEY: str(zlib.adler32(b"example.com")),
            TOKEN_LABEL_KEY: str(zlib.adler32(b"tok123")),
            SOLVER_IDENTIFICATION_LABEL_KEY: "true",
        }

    def test_empty_value_checksum(self) -> None:
        """adler32 of an empty string is 1."""
        challenge = Challenge(namespace="ns", dns_name="", token="")

        assert challenge_labels(challenge)[TOKEN_LABEL_KEY] == "1"

    def test_labels_stable(self) -> None:
        """Labels should be identical across calls."""
        challenge = Challenge.from_k8s_object(SAMPLE_CHALLENGE)

        assert challenge_labels(challenge) == challenge_labels(challenge)

    def test_distinct_tokens_distinct_labels(self) -> None:
        """Different tokens for the same domain should not share a label set."""
        a = Challenge(namespace="ns", dns_name="example.com", token="tok-a")
        b = Challenge(namespace="ns", dns_name="example.com", token="tok-b")

        assert challenge_labels(a) != challenge_labels(b)

    def test_label_selector_sorted(self) -> None:
        """Selector should list key=value pairs sorted by key."""
        assert label_selector({"b": "2", "a": "1"}) == "a=1,b=2"

    def test_label_selector_empty(self) -> None:
        assert label_selector({}) == ""
