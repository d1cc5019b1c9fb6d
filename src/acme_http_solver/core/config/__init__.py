"""Configuration management with Pydantic validation."""

from acme_http_solver.core.config.models import (
    ACME_SOLVER_LISTEN_PORT,
    SolverConfig,
    load_config,
)

__all__ = [
    "ACME_SOLVER_LISTEN_PORT",
    "SolverConfig",
    "load_config",
]
