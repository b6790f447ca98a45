"""Secret value command."""

from __future__ import annotations

from vvp2cli.commands.base import ResourceCommand
from vvp2cli.models import SecretValue
from vvp2cli.ui.views import SECRET_VALUES


class SecretValueCommand(ResourceCommand):
    """Manage secret values. Table output never shows the secret itself."""

    name = "secret-value"
    description = "Manage secret values"
    aliases = ["secret", "secrets", "sv"]

    collection = "secret_values"
    model = SecretValue
    view = SECRET_VALUES
    label = "secret value"
