"""Kubernetes integration custom exceptions.

``KubernetesError`` and its subclasses describe failures reported by the
API server. ``ConversionError`` and ``AmbiguousStateError`` are raised by the
solver itself and sit outside that hierarchy, so a store failure can be told
apart from a malformed object or a duplicate.
"""

from __future__ import annotations

from typing import Any


class KubernetesError(Exception):
    """Base exception for Kubernetes operations.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from Kubernetes API (if applicable).
        resource_type: Type of resource involved (e.g., "HTTPProxy").
        resource_name: Name of the resource involved.
        namespace: Namespace of the resource (if applicable).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize KubernetesError.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code from Kubernetes API.
            resource_type: Type of resource involved.
            resource_name: Name of the resource involved.
            namespace: Namespace of the resource.
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.namespace = namespace

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        if self.resource_type and self.resource_name:
            loc = f"[{self.resource_type}/{self.resource_name}"
            if self.namespace:
                loc += f" in {self.namespace}"
            loc += "]"
            parts.append(loc)
        return " ".join(parts)


class KubernetesConnectionError(KubernetesError):
    """Exception raised when the API server cannot be reached.

    This includes network errors, kubeconfig issues, and request timeouts.
    """

    def __init__(
        self,
        message: str = "Failed to connect to Kubernetes cluster",
        original_error: Exception | None = None,
    ) -> None:
        """Initialize KubernetesConnectionError.

        Args:
            message: Human-readable error message.
            original_error: The original exception that caused this error.
        """
        super().__init__(message=message)
        self.original_error = original_error


class KubernetesAuthError(KubernetesError):
    """Exception raised when authentication or authorization fails (401/403)."""

    def __init__(
        self,
        message: str = "Kubernetes authentication/authorization failed",
        status_code: int | None = 401,
        reason: str | None = None,
    ) -> None:
        """Initialize KubernetesAuthError.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code (usually 401 or 403).
            reason: Kubernetes API reason string.
        """
        super().__init__(message=message, status_code=status_code)
        self.reason = reason


class KubernetesNotFoundError(KubernetesError):
    """Exception raised when a requested resource is not found (404)."""

    def __init__(
        self,
        message: str = "Kubernetes resource not found",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize KubernetesNotFoundError.

        Args:
            message: Human-readable error message.
            resource_type: Type of resource.
            resource_name: Name of the resource.
            namespace: Namespace of the resource.
        """
        if resource_type and resource_name:
            message = f"{resource_type} '{resource_name}' not found"
            if namespace:
                message += f" in namespace '{namespace}'"
        super().__init__(
            message=message,
            status_code=404,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )


class KubernetesValidationError(KubernetesError):
    """Exception raised when the API server rejects an object (400/422)."""

    def __init__(
        self,
        message: str = "Invalid resource specification",
        validation_errors: dict[str, Any] | None = None,
        status_code: int | None = 422,
    ) -> None:
        """Initialize KubernetesValidationError.

        Args:
            message: Human-readable error message.
            validation_errors: Specific field validation errors.
            status_code: HTTP status code (usually 400 or 422).
        """
        super().__init__(message=message, status_code=status_code)
        self.validation_errors = validation_errors or {}


class KubernetesConflictError(KubernetesError):
    """Exception raised when a resource conflict occurs (409).

    Covers both "already exists" on create and a stale ``resourceVersion``
    on update.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize KubernetesConflictError.

        Args:
            message: Human-readable error message.
            resource_type: Type of resource.
            resource_name: Name of the resource.
            namespace: Namespace of the resource.
        """
        if resource_type and resource_name:
            message = f"{resource_type} '{resource_name}' was modified or already exists"
            if namespace:
                message += f" in namespace '{namespace}'"
        super().__init__(
            message=message,
            status_code=409,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )


class ConversionError(Exception):
    """Exception raised when a generic object cannot be mapped to a typed model.

    Attributes:
        message: Human-readable error message.
        kind: Kind of the typed model being converted.
        errors: Field level error details, if any.
    """

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize ConversionError.

        Args:
            message: Human-readable error message.
            kind: Kind of the typed model being converted.
            errors: Field level error details (e.g. from pydantic).
        """
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.errors = errors or []

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.kind:
            return f"{self.message} [{self.kind}]"
        return self.message


class AmbiguousStateError(Exception):
    """Exception raised when more than one dependent resource was found.

    The excess resources have already been deleted when this is raised; the
    caller is expected to retry and observe the single survivor.

    Attributes:
        resource_type: Type of the duplicated resource.
        namespace: Namespace the duplicates were found in.
        count: Number of resources observed.
        survivor: Name of the resource that was kept.
        deleted: Names of the resources that were deleted.
    """

    def __init__(
        self,
        resource_type: str,
        namespace: str,
        count: int,
        survivor: str | None = None,
        deleted: list[str] | None = None,
    ) -> None:
        """Initialize AmbiguousStateError.

        Args:
            resource_type: Type of the duplicated resource.
            namespace: Namespace the duplicates were found in.
            count: Number of resources observed.
            survivor: Name of the resource that was kept.
            deleted: Names of the resources that were deleted.
        """
        self.resource_type = resource_type
        self.namespace = namespace
        self.count = count
        self.survivor = survivor
        self.deleted = deleted or []
        super().__init__(
            f"multiple {resource_type} resources found in namespace '{namespace}' ({count})"
        )
