"""Base class for resource operations.

Provides the shared pieces every operation needs: the injected client
factory, structured logging with entity binding, namespace resolution and
identifier validation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import structlog

from kf_cli.core.config import DEFAULT_NAMESPACE
from kf_cli.core.exceptions import KfValidationError

logger = structlog.get_logger()

FactoryT = TypeVar("FactoryT", bound=Callable[..., Any])


class ResourceOperation(Generic[FactoryT]):
    """Base class for resource operations.

    The client factory is called once per invocation, right before the
    remote call, and its result is never cached. A factory that raises
    aborts the invocation with that same exception.

    Subclasses set ``_entity_name`` for structured log context.

    Example:
        >>> class Deleter(ResourceOperation[Callable[[], ResourceClient]]):
        ...     _entity_name = "app"
    """

    _entity_name: str = ""

    def __init__(
        self,
        client_factory: FactoryT,
        *,
        default_namespace: str = DEFAULT_NAMESPACE,
    ) -> None:
        """Initialize the operation.

        Args:
            client_factory: Produces the client used for the remote call.
            default_namespace: Namespace used when options leave it unset.
        """
        self._client_factory = client_factory
        self._default_namespace = default_namespace
        self._log = logger.bind(entity=self._entity_name)

    @property
    def default_namespace(self) -> str:
        return self._default_namespace or DEFAULT_NAMESPACE

    def _resolve_namespace(self, namespace: str | None) -> str:
        """Resolve namespace: configured value, then caller default, then process default."""
        return namespace or self.default_namespace

    @staticmethod
    def _require(value: str, what: str) -> None:
        """Reject an empty required identifier.

        Raises:
            KfValidationError: ``invalid <what>`` when value is empty.
        """
        if not value:
            raise KfValidationError(f"invalid {what}")
