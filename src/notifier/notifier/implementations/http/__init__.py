# ABOUTME: HTTP client helpers for notification channels
# ABOUTME: Exports the httpx client factory

from .client_factory import new_client_from_config

__all__ = [
    "new_client_from_config",
]
