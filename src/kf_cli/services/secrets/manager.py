"""Secret operations.

Secret values are never exposed in display models.
"""

from __future__ import annotations

import base64
from collections.abc import Callable
from typing import TYPE_CHECKING

from kf_cli.integrations.kubernetes.models import SecretSummary
from kf_cli.services.base import ResourceOperation
from kf_cli.services.secrets.options import (
    CreateConfig,
    DeleteConfig,
    GetConfig,
    ListConfig,
    create_option_defaults,
    delete_option_defaults,
    get_option_defaults,
    list_option_defaults,
)

if TYPE_CHECKING:
    from kf_cli.core.options import Option
    from kf_cli.integrations.kubernetes.resources import ResourceClient

SecretsClientFactory = Callable[[str], "ResourceClient"]


class SecretsManager(ResourceOperation[SecretsClientFactory]):
    """Manager for Kubernetes secrets.

    Security: Secret values are never included in display model responses.
    """

    _entity_name = "secret"

    def list_secrets(self, *options: Option[ListConfig]) -> list[SecretSummary]:
        """List secrets (keys only, values hidden).

        Args:
            *options: Overrides applied after the list defaults.

        Returns:
            Secrets in the resolved namespace matching the label selector.
        """
        cfg = list_option_defaults(self.default_namespace).extend(options).to_config()
        namespace = self._resolve_namespace(cfg.namespace)

        client = self._client_factory(namespace)

        self._log.debug("listing_secrets", namespace=namespace, label_selector=cfg.label_selector)
        items = client.list(
            namespace,
            label_selector=cfg.label_selector or None,
            timeout=cfg.timeout,
        )
        secrets = [SecretSummary.from_k8s_object(item) for item in items]
        self._log.debug("listed_secrets", count=len(secrets))
        return secrets

    def get_secret(self, name: str, *options: Option[GetConfig]) -> SecretSummary:
        """Get a single secret by name (keys only, values hidden)."""
        self._require(name, "secret name")

        cfg = get_option_defaults(self.default_namespace).extend(options).to_config()
        namespace = self._resolve_namespace(cfg.namespace)

        client = self._client_factory(namespace)

        self._log.debug("getting_secret", name=name, namespace=namespace)
        return SecretSummary.from_k8s_object(client.get(namespace, name, timeout=cfg.timeout))

    def create_secret(self, name: str, *options: Option[CreateConfig]) -> SecretSummary:
        """Create an Opaque secret.

        Args:
            name: Secret name.
            *options: Data, labels and namespace overrides.

        Returns:
            Created secret summary.
        """
        from kubernetes.client import V1ObjectMeta, V1Secret

        self._require(name, "secret name")

        cfg = create_option_defaults(self.default_namespace).extend(options).to_config()
        namespace = self._resolve_namespace(cfg.namespace)

        body = V1Secret(
            metadata=V1ObjectMeta(name=name, namespace=namespace, labels=cfg.labels or None),
            type="Opaque",
            string_data=cfg.string_data or None,
            data={k: base64.b64encode(v).decode() for k, v in cfg.data.items()} or None,
        )

        client = self._client_factory(namespace)

        self._log.info("creating_secret", name=name, namespace=namespace)
        result = client.create(namespace, body, timeout=cfg.timeout)
        self._log.info("created_secret", name=name, namespace=namespace)
        return SecretSummary.from_k8s_object(result)

    def delete_secret(self, name: str, *options: Option[DeleteConfig]) -> None:
        """Delete a secret."""
        self._require(name, "secret name")

        cfg = delete_option_defaults(self.default_namespace).extend(options).to_config()
        namespace = self._resolve_namespace(cfg.namespace)

        client = self._client_factory(namespace)

        self._log.info("deleting_secret", name=name, namespace=namespace)
        client.delete(namespace, name, timeout=cfg.timeout)
        self._log.info("deleted_secret", name=name, namespace=namespace)
