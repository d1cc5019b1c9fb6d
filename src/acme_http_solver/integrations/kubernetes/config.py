"""Kubernetes integration configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class KubernetesConfig(BaseModel):
    """Connection settings for the Kubernetes API server."""

    model_config = ConfigDict(extra="forbid")

    kubeconfig: str | None = None
    context: str | None = None
    request_timeout: int = 30
    retry_attempts: int = 3

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str | None) -> str | None:
        """Expand ~ in kubeconfig path."""
        if v is None:
            return None
        return str(Path(v).expanduser())

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: int) -> int:
        """Validate request_timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout must be positive")
        return v

    @field_validator("retry_attempts")
    @classmethod
    def validate_retry_attempts(cls, v: int) -> int:
        """Validate retry_attempts is non-negative."""
        if v < 0:
            raise ValueError("retry_attempts must be non-negative")
        return v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> KubernetesConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            ACME_SOLVER_KUBECONFIG: Override kubeconfig path
            ACME_SOLVER_CONTEXT: Override kubeconfig context
            ACME_SOLVER_REQUEST_TIMEOUT: Per-request timeout in seconds
        """
        config_dict = base_config.copy() if base_config else {}

        if kubeconfig := os.environ.get("ACME_SOLVER_KUBECONFIG"):
            config_dict["kubeconfig"] = kubeconfig

        if context := os.environ.get("ACME_SOLVER_CONTEXT"):
            config_dict["context"] = context

        if timeout := os.environ.get("ACME_SOLVER_REQUEST_TIMEOUT"):
            config_dict["request_timeout"] = int(timeout)

        return cls.model_validate(config_dict)
