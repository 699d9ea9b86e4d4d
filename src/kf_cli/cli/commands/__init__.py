"""kf CLI commands."""

from kf_cli.cli.commands.apps import register_app_commands
from kf_cli.cli.commands.secrets import register_secret_commands
from kf_cli.cli.commands.services import register_service_commands

__all__ = [
    "register_app_commands",
    "register_secret_commands",
    "register_service_commands",
]
