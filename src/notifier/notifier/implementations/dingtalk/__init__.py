# ABOUTME: DingTalk notification channel implementation
# ABOUTME: Exports the notifier and its payload, delivery and classification stages

from .payload import build_payload
from .classifier import classify_status
from .client import DingtalkDeliveryClient
from .notifier import DingtalkNotifier

__all__ = [
    "build_payload",
    "classify_status",
    "DingtalkDeliveryClient",
    "DingtalkNotifier",
]
