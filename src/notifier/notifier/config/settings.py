# ABOUTME: Main configuration composition for the notifier
# ABOUTME: Assembles base and channel settings and converts them into channel configs

from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError

from notifier.config._base import BaseNotifierSettings
from notifier.config.channels import (
    DEFAULT_MESSAGE_TEMPLATE,
    DEFAULT_TITLE_TEMPLATE,
    DingtalkConfig,
    HTTPClientConfig,
)
from notifier.exceptions import ConfigurationException


class NotifierSettings(BaseNotifierSettings):
    """Represents the complete, composed configuration for the notifier.

    Inherits the foundational settings from `BaseNotifierSettings` and adds the
    DingTalk receiver and HTTP transport settings. The webhook URL is optional
    here so that settings can be loaded before a receiver is configured;
    `to_dingtalk_config` enforces it.
    """

    DINGTALK_WEBHOOK_URL: Optional[str] = Field(
        default=None,
        description="Webhook endpoint of the DingTalk robot.",
    )
    DINGTALK_TITLE_TEMPLATE: str = Field(
        default=DEFAULT_TITLE_TEMPLATE,
        description="Jinja2 template rendered into the message title.",
    )
    DINGTALK_MESSAGE_TEMPLATE: str = Field(
        default=DEFAULT_MESSAGE_TEMPLATE,
        description="Jinja2 template rendered into the markdown body.",
    )

    HTTP_TIMEOUT_SECONDS: float = Field(default=10.0, description="Total timeout for webhook requests.")
    HTTP_PROXY_URL: Optional[str] = Field(default=None, description="Proxy for outbound webhook requests.")
    HTTP_VERIFY_TLS: bool = Field(default=True, description="Verify webhook TLS certificates.")
    HTTP_FOLLOW_REDIRECTS: bool = Field(default=True, description="Follow redirects from the webhook.")

    def http_client_config(self) -> HTTPClientConfig:
        try:
            return HTTPClientConfig(
                timeout_seconds=self.HTTP_TIMEOUT_SECONDS,
                proxy_url=self.HTTP_PROXY_URL,
                verify_tls=self.HTTP_VERIFY_TLS,
                follow_redirects=self.HTTP_FOLLOW_REDIRECTS,
            )
        except ValidationError as e:
            raise ConfigurationException(
                "Invalid HTTP client settings", code="INVALID_HTTP_CONFIG", details={"errors": e.errors()}
            ) from e

    def to_dingtalk_config(self) -> DingtalkConfig:
        """Build the immutable DingTalk channel configuration.

        Raises:
            ConfigurationException: If the webhook URL is missing or invalid.
        """
        if not self.DINGTALK_WEBHOOK_URL:
            raise ConfigurationException("DINGTALK_WEBHOOK_URL is not configured", code="MISSING_WEBHOOK_URL")

        http_config = self.http_client_config()
        try:
            return DingtalkConfig(
                webhook_url=self.DINGTALK_WEBHOOK_URL,
                title=self.DINGTALK_TITLE_TEMPLATE,
                message=self.DINGTALK_MESSAGE_TEMPLATE,
                http_config=http_config,
            )
        except ValidationError as e:
            raise ConfigurationException(
                f"Invalid DingTalk webhook URL: {self.DINGTALK_WEBHOOK_URL}",
                code="INVALID_WEBHOOK_URL",
                details={"errors": e.errors()},
            ) from e


@lru_cache
def get_settings() -> NotifierSettings:
    """Provides a singleton instance of the notifier settings.

    Returns:
        A single, cached instance of the NotifierSettings class.
    """
    return NotifierSettings()
