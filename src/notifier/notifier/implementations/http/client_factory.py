# ABOUTME: Factory building shared httpx clients from HTTP transport settings
# ABOUTME: Keeps TLS, proxy and timeout handling outside the notification channels

import httpx

from notifier import __version__
from notifier.config.channels import HTTPClientConfig
from notifier.exceptions import ConfigurationException


def new_client_from_config(config: HTTPClientConfig, name: str = "notifier") -> httpx.AsyncClient:
    """
    Build an ``httpx.AsyncClient`` for a notification channel.

    Args:
        config: HTTP transport settings.
        name: Channel name, included in the User-Agent header.

    Raises:
        ConfigurationException: If httpx rejects the settings (e.g. a malformed proxy URL).
    """
    headers = {"User-Agent": f"notifier/{__version__} ({name})"}
    headers.update(config.headers)
    try:
        return httpx.AsyncClient(
            timeout=config.timeout_seconds,
            proxy=config.proxy_url,
            verify=config.verify_tls,
            follow_redirects=config.follow_redirects,
            headers=headers,
        )
    except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError, ValueError) as e:
        raise ConfigurationException(
            f"failed to build HTTP client for {name}: {e}", code="INVALID_HTTP_CONFIG"
        ) from e
