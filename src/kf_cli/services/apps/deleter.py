"""Delete apps."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from kf_cli.services.apps.options import DeleteConfig, delete_option_defaults
from kf_cli.services.base import ResourceOperation

if TYPE_CHECKING:
    from kf_cli.core.options import Option
    from kf_cli.integrations.kubernetes.resources import ResourceClient

ServingClientFactory = Callable[[], "ResourceClient"]


class Deleter(ResourceOperation[ServingClientFactory]):
    """Deletes apps (Knative services).

    The serving client factory takes no arguments and is only called once
    validation has passed, so a cluster that cannot be reached is reported
    when a delete is attempted rather than when the Deleter is built.

    Example:
        >>> deleter = Deleter(lambda: CustomResourceClient(client, KNATIVE_SERVICE))
        >>> deleter.delete("my-app", with_delete_namespace("prod"))
    """

    _entity_name = "app"

    def delete(self, app_name: str, *options: Option[DeleteConfig]) -> None:
        """Delete an app.

        Args:
            app_name: Name of the app to delete.
            *options: Overrides applied after the delete defaults.

        Raises:
            KfValidationError: If app_name is empty. No remote call is made.
            Exception: Whatever the client factory or the delete call raises,
                unchanged.
        """
        self._require(app_name, "app name")

        cfg = delete_option_defaults(self.default_namespace).extend(options).to_config()
        namespace = self._resolve_namespace(cfg.namespace)

        client = self._client_factory()

        self._log.info("deleting_app", name=app_name, namespace=namespace)
        client.delete(namespace, app_name, timeout=cfg.timeout)
        self._log.info("deleted_app", name=app_name, namespace=namespace)
