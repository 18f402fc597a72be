# ABOUTME: Models describing one notification delivery attempt
# ABOUTME: Contains the call context, rendered message, wire payload and delivery verdict

import asyncio
from dataclasses import dataclass, field
from typing import Iterator, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from notifier.exceptions import NotifierException
from notifier.models.types import LabelSet


@dataclass(frozen=True)
class NotificationContext:
    """
    Per-call context supplied by the dispatcher.

    Carries the receiver identity and group labels used for rendering, plus
    the cancellation signals honored while the request is in flight: an
    optional ``timeout`` in seconds and an optional ``cancel_event`` the caller
    may set to abandon the attempt.
    """

    receiver: str
    group_labels: LabelSet = field(default_factory=dict)
    group_key: str = ""
    timeout: Optional[float] = None
    cancel_event: Optional[asyncio.Event] = None

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()


class RenderedMessage(BaseModel):
    """Rendered title and body text for one attempt."""

    title: str = Field(description="Rendered title")
    body: str = Field(description="Rendered body text")

    model_config = ConfigDict(frozen=True)


class MarkdownContent(BaseModel):
    """Markdown section of the webhook payload."""

    title: str
    text: str

    model_config = ConfigDict(frozen=True)


class WirePayload(BaseModel):
    """
    JSON body posted to the webhook.

    Serializes to ``{"msgtype": "markdown", "markdown": {"title": ..., "text": ...}}``
    with no other keys.
    """

    message_type: Literal["markdown"] = Field(default="markdown", alias="msgtype")
    markdown: MarkdownContent

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_json_bytes(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")


@dataclass(frozen=True)
class DeliveryVerdict:
    """
    Outcome of one delivery attempt.

    A successful verdict (``error is None``) is never retryable. The verdict
    unpacks as ``retryable, error = verdict``.
    """

    retryable: bool = False
    error: Optional[NotifierException] = None

    def __post_init__(self) -> None:
        if self.error is None and self.retryable:
            raise ValueError("a successful delivery cannot be retryable")

    def __iter__(self) -> Iterator[Union[bool, Optional[NotifierException]]]:
        yield self.retryable
        yield self.error

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> "DeliveryVerdict":
        return cls(retryable=False, error=None)

    @classmethod
    def from_error(cls, error: NotifierException) -> "DeliveryVerdict":
        return cls(retryable=error.retryable, error=error)
