"""Error taxonomy for kf operations.

Every error raised by this package carries an ``ErrorKind`` so callers can
tell validation problems (never worth retrying) apart from failures that
came back from the cluster. Executors never wrap the errors they forward;
the kind travels on the exception class itself.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

EMPTY_NAMESPACE_ERROR = "no namespace specified, use --namespace or set KF_NAMESPACE"


class ErrorKind(StrEnum):
    """Where in an operation an error originated."""

    VALIDATION = "validation"
    CONFIG_PAYLOAD = "config_payload"
    CLIENT_CONSTRUCTION = "client_construction"
    REMOTE = "remote"


class KfError(Exception):
    """Base exception for kf operations.

    Attributes:
        message: Human-readable error message, shown to the user verbatim.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.REMOTE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class KfValidationError(KfError):
    """Raised when a required identifier or argument is missing or invalid.

    Detected before any remote interaction.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION


class EmptyNamespaceError(KfValidationError):
    """Raised when no namespace is configured anywhere."""

    def __init__(self, message: str = EMPTY_NAMESPACE_ERROR) -> None:
        super().__init__(message)


class ConfigurationError(KfValidationError):
    """Raised when the kf configuration file cannot be loaded."""


class ConfigPayloadError(KfError):
    """Raised when a ``--config`` payload cannot be read or parsed."""

    kind: ClassVar[ErrorKind] = ErrorKind.CONFIG_PAYLOAD


def error_kind(error: BaseException) -> ErrorKind:
    """Classify an exception.

    Exceptions that do not belong to the kf hierarchy came from an injected
    client and are treated as remote failures.
    """
    if isinstance(error, KfError):
        return error.kind
    return ErrorKind.REMOTE
