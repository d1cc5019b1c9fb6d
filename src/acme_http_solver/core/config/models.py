"""Solver configuration models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from acme_http_solver.integrations.kubernetes.config import KubernetesConfig

DEFAULT_INGRESS_CLASS = "contour-public"
DEFAULT_GENERATE_NAME = "cm-acme-http-solver-"
ACME_SOLVER_LISTEN_PORT = 8089


class SolverConfig(BaseModel):
    """Configuration for the HTTP-01 HTTPProxy solver."""

    model_config = ConfigDict(extra="forbid")

    ingress_class: str = Field(
        default=DEFAULT_INGRESS_CLASS,
        description="Value of the kubernetes.io/ingress.class annotation on created proxies",
    )
    generate_name: str = Field(
        default=DEFAULT_GENERATE_NAME,
        description="metadata.generateName prefix for created proxies",
    )
    listen_port: int = Field(
        default=ACME_SOLVER_LISTEN_PORT,
        description="Port the solver service listens on",
    )
    kubernetes: KubernetesConfig = Field(default_factory=KubernetesConfig)

    @field_validator("generate_name")
    @classmethod
    def validate_generate_name(cls, v: str) -> str:
        """Require a trailing dash so generated suffixes stay readable."""
        if not v or not v.endswith("-"):
            raise ValueError("generate_name must be non-empty and end with '-'")
        return v

    @field_validator("listen_port")
    @classmethod
    def validate_listen_port(cls, v: int) -> int:
        """Validate listen_port is a TCP port."""
        if not 1 <= v <= 65535:
            raise ValueError("listen_port must be between 1 and 65535")
        return v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> SolverConfig:
        """Create configuration with environment variable overrides.

        Supported environment variables:
            ACME_SOLVER_INGRESS_CLASS: Override the ingress class annotation
            ACME_SOLVER_GENERATE_NAME: Override the generateName prefix
            ACME_SOLVER_LISTEN_PORT: Override the solver listen port
            ACME_SOLVER_KUBECONFIG / ACME_SOLVER_CONTEXT /
            ACME_SOLVER_REQUEST_TIMEOUT: See ``KubernetesConfig.from_env``
        """
        config_dict = base_config.copy() if base_config else {}

        if ingress_class := os.environ.get("ACME_SOLVER_INGRESS_CLASS"):
            config_dict["ingress_class"] = ingress_class

        if generate_name := os.environ.get("ACME_SOLVER_GENERATE_NAME"):
            config_dict["generate_name"] = generate_name

        if listen_port := os.environ.get("ACME_SOLVER_LISTEN_PORT"):
            config_dict["listen_port"] = int(listen_port)

        config_dict["kubernetes"] = KubernetesConfig.from_env(config_dict.get("kubernetes"))

        return cls.model_validate(config_dict)


def load_config(path: Path | str | None = None) -> SolverConfig:
    """Load solver configuration from a YAML file plus environment overrides.

    Args:
        path: Path to a YAML file. Missing or None means defaults only.

    Returns:
        Validated solver configuration.

    Raises:
        ValueError: If the file does not contain a YAML mapping.
    """
    data: dict[str, Any] = {}
    if path is not None:
        config_path = Path(path).expanduser()
        if config_path.exists():
            with config_path.open() as f:
                loaded = yaml.safe_load(f)
            if loaded is not None and not isinstance(loaded, dict):
                raise ValueError(f"Configuration file {config_path} must contain a mapping")
            data = loaded or {}
    return SolverConfig.from_env(data)
