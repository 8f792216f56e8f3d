"""Pydantic models for webhook events and payloads."""

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    """Event supplied by the caller; only ``type`` is used."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str


class WebhookPayload(BaseModel):
    """JSON body sent to the webhook."""

    hash: str = Field(min_length=40, max_length=40, pattern=r"^[0-9a-f]+$")
    event: str
    key: str
