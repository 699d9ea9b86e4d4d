"""Kubernetes integration exceptions.

Raised by the production resource clients. Operations forward them to the
caller untouched, so their messages are what the user sees.
"""

from __future__ import annotations

from typing import ClassVar

from kf_cli.core.exceptions import ErrorKind, KfError


class KubernetesError(KfError):
    """Base exception for failures returned by the Kubernetes API.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the API (if applicable).
        resource_type: Kind of resource involved (e.g., "Secret").
        resource_name: Name of the resource involved.
        namespace: Namespace of the resource (if applicable).
    """

    kind: ClassVar[ErrorKind] = ErrorKind.REMOTE

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.namespace = namespace


class KubernetesConnectionError(KubernetesError):
    """Raised when a client for the cluster cannot be constructed.

    Covers missing or broken kubeconfig files and unknown contexts.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.CLIENT_CONSTRUCTION

    def __init__(
        self,
        message: str = "failed to connect to Kubernetes cluster",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message=message)
        self.original_error = original_error


class KubernetesAuthError(KubernetesError):
    """Raised on 401/403 responses."""

    def __init__(
        self,
        message: str = "Kubernetes authentication/authorization failed",
        status_code: int | None = 401,
        reason: str | None = None,
    ) -> None:
        super().__init__(message=message, status_code=status_code)
        self.reason = reason


class KubernetesNotFoundError(KubernetesError):
    """Raised on 404 responses."""

    def __init__(
        self,
        message: str = "Kubernetes resource not found",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        if resource_type and resource_name:
            message = f'{resource_type} "{resource_name}" not found'
            if namespace:
                message += f' in namespace "{namespace}"'
        super().__init__(
            message=message,
            status_code=404,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )


class KubernetesConflictError(KubernetesError):
    """Raised on 409 responses, usually because the resource already exists."""

    def __init__(
        self,
        message: str = "resource conflict",
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> None:
        if resource_type and resource_name:
            message = f'{resource_type} "{resource_name}" already exists'
            if namespace:
                message += f' in namespace "{namespace}"'
        super().__init__(
            message=message,
            status_code=409,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )


class KubernetesValidationError(KubernetesError):
    """Raised when the API rejects a resource spec (400/422)."""

    def __init__(
        self,
        message: str = "invalid resource specification",
        status_code: int | None = 422,
    ) -> None:
        super().__init__(message=message, status_code=status_code)


class KubernetesTimeoutError(KubernetesError):
    """Raised when a request exceeds its timeout."""

    def __init__(
        self,
        message: str = "Kubernetes request timed out",
        timeout_seconds: float | None = None,
    ) -> None:
        if timeout_seconds:
            message = f"{message} (after {timeout_seconds}s)"
        super().__init__(message=message)
        self.timeout_seconds = timeout_seconds
