"""Typed per-kind resource clients.

Each client exposes the same capability set (create, get, list, delete)
against one resource kind, scoped by namespace. Operations depend on the
``ResourceClient`` protocol only, so tests can pass any double that records
calls. Failures from the kubernetes library are translated into the
``KubernetesError`` family here and nowhere else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from kf_cli.integrations.kubernetes.client import KubernetesClient

logger = structlog.get_logger()


@dataclass(frozen=True)
class ResourceKind:
    """Coordinates of a custom resource kind."""

    group: str
    version: str
    plural: str
    kind: str

    @property
    def api_version(self) -> str:
        return f"{self.group}/{self.version}"


KNATIVE_SERVICE = ResourceKind("serving.knative.dev", "v1", "services", "Service")
SERVICE_INSTANCE = ResourceKind(
    "servicecatalog.k8s.io", "v1beta1", "serviceinstances", "ServiceInstance"
)


class ResourceClient(Protocol):
    """Capability set shared by every resource client."""

    def create(self, namespace: str, body: Any, *, timeout: float | None = None) -> Any: ...

    def get(self, namespace: str, name: str, *, timeout: float | None = None) -> Any: ...

    def list(
        self,
        namespace: str,
        *,
        label_selector: str | None = None,
        field_selector: str | None = None,
        timeout: float | None = None,
    ) -> list[Any]: ...

    def delete(self, namespace: str, name: str, *, timeout: float | None = None) -> None: ...


def _request_kwargs(
    timeout: float | None,
    label_selector: str | None = None,
    field_selector: str | None = None,
) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if timeout is not None:
        kwargs["_request_timeout"] = timeout
    if label_selector:
        kwargs["label_selector"] = label_selector
    if field_selector:
        kwargs["field_selector"] = field_selector
    return kwargs


class CustomResourceClient:
    """Resource client for a custom resource kind via ``CustomObjectsApi``.

    Objects are returned as raw dicts, as the ``CustomObjectsApi`` does.
    """

    def __init__(self, client: KubernetesClient, kind: ResourceKind) -> None:
        self._client = client
        self._kind = kind
        self._log = logger.bind(kind=kind.kind)

    @property
    def kind(self) -> ResourceKind:
        return self._kind

    def _timeout(self, timeout: float | None) -> float | None:
        return timeout if timeout is not None else self._client.timeout

    def create(
        self, namespace: str, body: dict[str, Any], *, timeout: float | None = None
    ) -> dict[str, Any]:
        name = body.get("metadata", {}).get("name")
        timeout = self._timeout(timeout)
        self._log.debug("create_custom_object", name=name, namespace=namespace)
        try:
            result: dict[str, Any] = self._client.custom_objects.create_namespaced_custom_object(
                self._kind.group,
                self._kind.version,
                namespace,
                self._kind.plural,
                body,
                **_request_kwargs(timeout),
            )
            return result
        except Exception as e:
            raise self._client.translate_api_exception(
                e, self._kind.kind, name, namespace, timeout
            ) from e

    def get(self, namespace: str, name: str, *, timeout: float | None = None) -> dict[str, Any]:
        timeout = self._timeout(timeout)
        self._log.debug("get_custom_object", name=name, namespace=namespace)
        try:
            result: dict[str, Any] = self._client.custom_objects.get_namespaced_custom_object(
                self._kind.group,
                self._kind.version,
                namespace,
                self._kind.plural,
                name,
                **_request_kwargs(timeout),
            )
            return result
        except Exception as e:
            raise self._client.translate_api_exception(
                e, self._kind.kind, name, namespace, timeout
            ) from e

    def list(
        self,
        namespace: str,
        *,
        label_selector: str | None = None,
        field_selector: str | None = None,
        timeout: float | None = None,
    ) -> list[dict[str, Any]]:
        timeout = self._timeout(timeout)
        self._log.debug("list_custom_objects", namespace=namespace, label_selector=label_selector)
        try:
            result = self._client.custom_objects.list_namespaced_custom_object(
                self._kind.group,
                self._kind.version,
                namespace,
                self._kind.plural,
                **_request_kwargs(timeout, label_selector, field_selector),
            )
        except Exception as e:
            raise self._client.translate_api_exception(
                e, self._kind.kind, None, namespace, timeout
            ) from e
        items: list[dict[str, Any]] = result.get("items", [])
        return items

    def delete(self, namespace: str, name: str, *, timeout: float | None = None) -> None:
        timeout = self._timeout(timeout)
        self._log.debug("delete_custom_object", name=name, namespace=namespace)
        try:
            self._client.custom_objects.delete_namespaced_custom_object(
                self._kind.group,
                self._kind.version,
                namespace,
                self._kind.plural,
                name,
                **_request_kwargs(timeout),
            )
        except Exception as e:
            raise self._client.translate_api_exception(
                e, self._kind.kind, name, namespace, timeout
            ) from e


class SecretResourceClient:
    """Resource client for core/v1 Secrets via ``CoreV1Api``."""

    def __init__(self, client: KubernetesClient) -> None:
        self._client = client

    def _timeout(self, timeout: float | None) -> float | None:
        return timeout if timeout is not None else self._client.timeout

    def create(self, namespace: str, body: Any, *, timeout: float | None = None) -> Any:
        timeout = self._timeout(timeout)
        name = getattr(getattr(body, "metadata", None), "name", None)
        try:
            return self._client.core_v1.create_namespaced_secret(
                namespace=namespace, body=body, **_request_kwargs(timeout)
            )
        except Exception as e:
            raise self._client.translate_api_exception(
                e, "Secret", name, namespace, timeout
            ) from e

    def get(self, namespace: str, name: str, *, timeout: float | None = None) -> Any:
        timeout = self._timeout(timeout)
        try:
            return self._client.core_v1.read_namespaced_secret(
                name=name, namespace=namespace, **_request_kwargs(timeout)
            )
        except Exception as e:
            raise self._client.translate_api_exception(
                e, "Secret", name, namespace, timeout
            ) from e

    def list(
        self,
        namespace: str,
        *,
        label_selector: str | None = None,
        field_selector: str | None = None,
        timeout: float | None = None,
    ) -> list[Any]:
        timeout = self._timeout(timeout)
        try:
            result = self._client.core_v1.list_namespaced_secret(
                namespace=namespace,
                **_request_kwargs(timeout, label_selector, field_selector),
            )
        except Exception as e:
            raise self._client.translate_api_exception(
                e, "Secret", None, namespace, timeout
            ) from e
        return list(result.items)

    def delete(self, namespace: str, name: str, *, timeout: float | None = None) -> None:
        timeout = self._timeout(timeout)
        try:
            self._client.core_v1.delete_namespaced_secret(
                name=name, namespace=namespace, **_request_kwargs(timeout)
            )
        except Exception as e:
            raise self._client.translate_api_exception(
                e, "Secret", name, namespace, timeout
            ) from e
