# ABOUTME: Notifier implementations package exports
# ABOUTME: Contains concrete channels, renderers and HTTP helpers

from .dingtalk import DingtalkNotifier, DingtalkDeliveryClient, build_payload, classify_status
from .http import new_client_from_config
from .noop import NoOpNotifier
from .template import JinjaMessageRenderer

__all__ = [
    "DingtalkNotifier",
    "DingtalkDeliveryClient",
    "build_payload",
    "classify_status",
    "new_client_from_config",
    "NoOpNotifier",
    "JinjaMessageRenderer",
]
