"""CLI commands for alerthook."""

import json
from typing import Optional

import typer
from rich.console import Console

from alerthook import __version__
from alerthook.core.exceptions import AlertHookException
from alerthook.utils.encoding import get_codec
from alerthook.utils.hashing import HASH
from alerthook.web.client import WebClient
from alerthook.webhooks.models import Event
from alerthook.webhooks.notifier import WebhookNotifier

app = typer.Typer(name="alerthook", help="Event-triggered webhook notifier")
console = Console()
err_console = Console(stderr=True)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"[bold green]alerthook v{__version__}[/bold green]")


@app.command()
def notify(
    event_type: str = typer.Argument(..., metavar="TYPE", help="Event type"),
    url: Optional[str] = typer.Option(None, help="Webhook URL"),
    key: Optional[str] = typer.Option(None, help="Static key sent in the payload"),
    timeout: Optional[float] = typer.Option(None, help="Request timeout in seconds"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Log the request instead of sending it"),
) -> None:
    """Deliver an event to the webhook.

    Args:
        event_type: Event type
        url: Webhook URL
        key: Static key
        timeout: Request timeout
        dry_run: Do not send anything
    """
    with WebClient(timeout=timeout, dry_run=dry_run or None) as web:
        notifier = WebhookNotifier(web=web, url=url, key=key)
        try:
            notifier.notify(Event(type=event_type))
        except AlertHookException as e:
            err_console.print(f"[red]{e.message}[/red]")
            raise typer.Exit(code=1) from e


@app.command()
def payload(event_type: str = typer.Argument(..., metavar="TYPE", help="Event type")) -> None:
    """Print the JSON payload an event would produce."""
    body = WebhookNotifier(web=WebClient(dry_run=True)).build_payload(Event(type=event_type))
    console.print_json(json.dumps(body.model_dump()))


@app.command("hash")
def hash_text(
    algorithm: str = typer.Argument(..., help="md5, sha1, sha256 or sha512"),
    text: str = typer.Argument(..., help="Text to hash"),
    encoding: str = typer.Option("hex", help="Output encoding, e.g. hex or base64-urlsafe-nopad"),
) -> None:
    """Hash text and print the encoded digest."""
    try:
        digest = HASH.digest(algorithm, text)
        console.print(get_codec(encoding).encode(digest), markup=False, highlight=False)
    except AlertHookException as e:
        err_console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(code=2) from e


if __name__ == "__main__":
    app()
