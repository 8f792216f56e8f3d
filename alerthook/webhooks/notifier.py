"""Event-triggered webhook notifier."""

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from alerthook.core.config import get_settings
from alerthook.core.console import ScriptConsole
from alerthook.core.exceptions import ConfigurationException, ValidationException
from alerthook.core.logging import get_logger
from alerthook.utils.encoding import HEX, Codec
from alerthook.utils.hashing import HASH, Hasher
from alerthook.web.client import WebClient
from alerthook.webhooks.models import Event, WebhookPayload

settings = get_settings()
logger = get_logger(__name__)


class WebhookNotifier:
    """POSTs a hash-and-key JSON payload when an event of the trigger type arrives.

    The HTTP client, hasher, hex codec and console are collaborators and can
    be swapped for test doubles.
    """

    def __init__(
        self,
        web: Optional[WebClient] = None,
        hasher: Optional[Hasher] = None,
        hex_codec: Optional[Codec] = None,
        console: Optional[ScriptConsole] = None,
        url: Optional[str] = None,
        key: Optional[str] = None,
        trigger: Optional[str] = None,
        hash_input: Optional[str] = None,
    ) -> None:
        """Initialize webhook notifier.

        Args:
            web: HTTP client (default: new WebClient from settings)
            hasher: Digest functions (default: HASH)
            hex_codec: Hex encoder (default: HEX)
            console: Diagnostic console (default: stderr console)
            url: Webhook URL (default from settings)
            key: Static key placed in the payload (default from settings)
            trigger: Event type that fires the webhook (default from settings)
            hash_input: Text whose SHA-1 goes in the payload (default from settings)
        """
        self.web = web if web is not None else WebClient()
        self.hasher = hasher or HASH
        self.hex = hex_codec or HEX
        self.console = console if console is not None else ScriptConsole()
        self.url = url if url is not None else settings.webhook_url
        self.key = key if key is not None else settings.webhook_key
        self.trigger = trigger if trigger is not None else settings.webhook_trigger
        self.hash_input = hash_input if hash_input is not None else settings.webhook_hash_input

        if not self.url:
            raise ConfigurationException("Webhook URL is not configured", details={"setting": "WEBHOOK_URL"})

    @staticmethod
    def coerce_event(event: Event | Mapping[str, Any]) -> Event:
        """Accept an Event or a mapping with a ``type`` key.

        Raises:
            ValidationException: If the mapping is not a valid event
        """
        if isinstance(event, Event):
            return event
        try:
            return Event.model_validate(event)
        except ValidationError as e:
            raise ValidationException("Invalid event", details={"errors": e.errors()}) from e

    def matches(self, event: Event) -> bool:
        return event.type == self.trigger

    def build_payload(self, event: Event | Mapping[str, Any]) -> WebhookPayload:
        """Build the webhook body for an event."""
        event = self.coerce_event(event)
        return WebhookPayload(
            hash=self.hex.encode(self.hasher.sha1(self.hash_input)),
            event=event.type,
            key=self.key,
        )

    def notify(self, event: Event | Mapping[str, Any]) -> None:
        """Send the webhook if the event type matches the trigger.

        A non-200 response is reported on the console as
        ``POST FAILED: <message>``; nothing is raised.
        """
        event = self.coerce_event(event)

        if not self.matches(event):
            logger.debug("webhook_skipped", event_type=event.type, trigger=self.trigger)
            return

        payload = self.build_payload(event)
        logger.info("webhook_triggered", event_type=event.type, url=self.url)

        # request budget and stats cover a single invocation
        self.web.reset()
        result = self.web.post_json(self.url, None, payload.model_dump())

        if result.code != 200:
            self.console.log("POST FAILED: " + result.message)
