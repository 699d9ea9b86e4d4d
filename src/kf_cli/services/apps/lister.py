"""List apps."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from kf_cli.integrations.kubernetes.models import AppSummary
from kf_cli.services.apps.options import ListConfig, list_option_defaults
from kf_cli.services.base import ResourceOperation

if TYPE_CHECKING:
    from kf_cli.core.options import Option
    from kf_cli.integrations.kubernetes.resources import ResourceClient

AppsClientFactory = Callable[[str], "ResourceClient"]


class AppLister(ResourceOperation[AppsClientFactory]):
    """Lists apps in a namespace."""

    _entity_name = "app"

    def list(self, *options: Option[ListConfig]) -> list[AppSummary]:
        """List apps.

        Args:
            *options: Overrides applied after the list defaults.

        Returns:
            App summaries matching the label selector and app name filters.
        """
        cfg = list_option_defaults(self.default_namespace).extend(options).to_config()
        namespace = self._resolve_namespace(cfg.namespace)
        field_selector = f"metadata.name={cfg.app_name}" if cfg.app_name else None

        client = self._client_factory(namespace)

        self._log.debug("listing_apps", namespace=namespace, label_selector=cfg.label_selector)
        items = client.list(
            namespace,
            label_selector=cfg.label_selector or None,
            field_selector=field_selector,
            timeout=cfg.timeout,
        )
        apps = [AppSummary.from_k8s_object(item) for item in items]
        self._log.debug("listed_apps", count=len(apps), namespace=namespace)
        return apps
