# ABOUTME: Payload builder for the DingTalk webhook
# ABOUTME: Maps a rendered message onto the markdown wire payload

from notifier.models.notification import MarkdownContent, RenderedMessage, WirePayload


def build_payload(message: RenderedMessage) -> WirePayload:
    """Map a rendered message onto the DingTalk markdown payload."""
    return WirePayload(markdown=MarkdownContent(title=message.title, text=message.body))
