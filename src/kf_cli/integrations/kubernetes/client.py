"""Kubernetes API client wrapper.

Wraps the official kubernetes Python client with kubeconfig loading, lazy
API group initialization and consistent error translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from urllib3.exceptions import MaxRetryError
from urllib3.exceptions import TimeoutError as Urllib3TimeoutError

from kf_cli.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesTimeoutError,
    KubernetesValidationError,
)

if TYPE_CHECKING:
    from kubernetes.client import CoreV1Api, CustomObjectsApi

    from kf_cli.core.config import KfConfig

logger = structlog.get_logger()


class KubernetesClient:
    """Kubernetes API client for a single kubeconfig context.

    Constructing a client loads the kubeconfig, so construction is where an
    unreachable or misconfigured cluster first shows up. Operations
    construct clients through a factory for exactly that reason.

    Example:
        ```python
        from kf_cli.core.config import load_config
        from kf_cli.integrations.kubernetes import KubernetesClient

        with KubernetesClient(load_config()) as client:
            secrets = client.core_v1.list_namespaced_secret("default")
        ```
    """

    def __init__(self, config: KfConfig) -> None:
        """Initialize the client and load kubeconfig.

        Args:
            config: kf configuration (context, kubeconfig path, namespace).

        Raises:
            KubernetesConnectionError: If neither kubeconfig nor in-cluster
                configuration can be loaded.
        """
        self._config = config
        self._current_context: str | None = None

        self._core_v1: CoreV1Api | None = None
        self._custom_objects: CustomObjectsApi | None = None

        self._load_config()

        logger.debug(
            "kubernetes_client_initialized",
            context=self._current_context,
            default_namespace=config.namespace,
        )

    def _load_config(self) -> None:
        """Load Kubernetes configuration from kubeconfig or in-cluster."""
        from kubernetes import config
        from kubernetes.config import ConfigException

        try:
            config.load_kube_config(
                config_file=self._config.kubeconfig,
                context=self._config.context,
            )
            self._current_context = self._config.context or "current-context"
            logger.debug(
                "loaded_kubeconfig",
                context=self._config.context,
                kubeconfig=self._config.kubeconfig,
            )
        except ConfigException:
            try:
                config.load_incluster_config()
                self._current_context = "in-cluster"
                logger.debug("loaded_incluster_config")
            except ConfigException as e:
                raise KubernetesConnectionError(
                    message="cannot load Kubernetes configuration, "
                    "ensure a kubeconfig exists or kf runs inside a cluster",
                    original_error=e,
                ) from e

        self._core_v1 = None
        self._custom_objects = None

    # =========================================================================
    # Lazy API Group Accessors
    # =========================================================================

    @property
    def core_v1(self) -> CoreV1Api:
        """Get CoreV1Api instance (secrets, namespaces, etc.)."""
        if self._core_v1 is None:
            from kubernetes.client import CoreV1Api

            self._core_v1 = CoreV1Api()
        return self._core_v1

    @property
    def custom_objects(self) -> CustomObjectsApi:
        """Get CustomObjectsApi instance (Knative services, service instances)."""
        if self._custom_objects is None:
            from kubernetes.client import CustomObjectsApi

            self._custom_objects = CustomObjectsApi()
        return self._custom_objects

    # =========================================================================
    # Error Translation
    # =========================================================================

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
        timeout: float | None = None,
    ) -> KubernetesError:
        """Translate an exception from the kubernetes client to a KubernetesError.

        Args:
            e: The original exception.
            resource_type: Kind of resource being operated on.
            resource_name: Name of the resource.
            namespace: Namespace of the resource.
            timeout: Request timeout in effect, reported on timeouts.

        Returns:
            An appropriate KubernetesError subclass.
        """
        from kubernetes.client import ApiException

        if isinstance(e, KubernetesError):
            return e

        if isinstance(e, Urllib3TimeoutError) or (
            isinstance(e, MaxRetryError) and isinstance(e.reason, Urllib3TimeoutError)
        ):
            return KubernetesTimeoutError(timeout_seconds=timeout)

        if not isinstance(e, ApiException):
            return KubernetesError(
                message=str(e),
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        status = e.status

        if status in (401, 403):
            return KubernetesAuthError(
                message=e.reason or "authentication/authorization failed",
                status_code=status,
                reason=e.reason,
            )

        if status == 404:
            return KubernetesNotFoundError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status == 409:
            return KubernetesConflictError(
                resource_type=resource_type,
                resource_name=resource_name,
                namespace=namespace,
            )

        if status in (400, 422):
            return KubernetesValidationError(
                message=e.reason or "validation failed",
                status_code=status,
            )

        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {status}",
            status_code=status,
            resource_type=resource_type,
            resource_name=resource_name,
            namespace=namespace,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def current_context(self) -> str:
        """The loaded context name, or 'in-cluster' inside a pod."""
        return self._current_context or "unknown"

    @property
    def default_namespace(self) -> str:
        """Default namespace from config."""
        return self._config.namespace

    @property
    def timeout(self) -> int | None:
        """Configured request timeout in seconds."""
        return self._config.timeout

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Release cached API instances."""
        self._core_v1 = None
        self._custom_objects = None
        logger.debug("kubernetes_client_closed")

    def __enter__(self) -> KubernetesClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
