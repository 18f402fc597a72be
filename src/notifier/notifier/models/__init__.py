# ABOUTME: Models package exports
# ABOUTME: Exports alert, template view and delivery models

from notifier.models.alert import Alert, AlertStatus, AlertGroupView, fingerprint_labels
from notifier.models.notification import (
    NotificationContext,
    RenderedMessage,
    MarkdownContent,
    WirePayload,
    DeliveryVerdict,
)
from notifier.models.types import AlertData, TemplateAlert, LabelSet, TemplateContext

__all__ = [
    "Alert",
    "AlertStatus",
    "AlertGroupView",
    "fingerprint_labels",
    "NotificationContext",
    "RenderedMessage",
    "MarkdownContent",
    "WirePayload",
    "DeliveryVerdict",
    "AlertData",
    "TemplateAlert",
    "LabelSet",
    "TemplateContext",
]
