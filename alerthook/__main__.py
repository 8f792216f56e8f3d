"""Entry point for ``python -m alerthook``."""

from alerthook.cli.commands import app

app()
