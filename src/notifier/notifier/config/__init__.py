# ABOUTME: Configuration package initialization
# ABOUTME: Exports settings, channel configuration models and logging utilities

from notifier.config.channels import (
    DEFAULT_MESSAGE_TEMPLATE,
    DEFAULT_TITLE_TEMPLATE,
    DingtalkConfig,
    HTTPClientConfig,
)
from notifier.config.settings import NotifierSettings, get_settings
from notifier.config.logging import get_logger, setup_logging

__all__ = [
    "DEFAULT_MESSAGE_TEMPLATE",
    "DEFAULT_TITLE_TEMPLATE",
    "DingtalkConfig",
    "HTTPClientConfig",
    "NotifierSettings",
    "get_settings",
    "get_logger",
    "setup_logging",
]
