# ABOUTME: Exception classes for the notification channel
# ABOUTME: Every exception carries a resolved retryable flag for the outer dispatcher

from typing import Dict, Any


class NotifierException(Exception):
    """Base exception class for the notification channel.

    Provides structured error handling with optional error codes and contextual
    details. Each subclass declares whether the failure it represents may
    succeed on a later, unchanged attempt through the ``retryable`` attribute.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
        retryable: Whether a later attempt has a reasonable chance of succeeding
    """

    retryable: bool = False

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize NotifierException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ConfigurationException(NotifierException):
    """Exception raised for configuration errors.

    Used when channel configuration is invalid or missing, such as:
    - Missing webhook URL
    - Invalid HTTP client settings

    A configuration problem never heals on retry.
    """

    retryable = False


class RenderError(NotifierException):
    """Exception raised when message templates fail to render.

    ``details["templates"]`` maps each failing template name to its error text.
    No network call is attempted once this is raised.
    """

    retryable = False


class RequestConstructionError(NotifierException):
    """Exception raised when the outgoing request cannot be built.

    Used for payload serialization failures and malformed request objects.
    These are static misconfigurations and are never retried.
    """

    retryable = False


class NetworkError(NotifierException):
    """Exception raised when sending the request fails in transit.

    Used for connection failures, DNS errors, timeouts and caller
    cancellation. Transient conditions may resolve, so these are retryable.
    """

    retryable = True


class StatusError(NotifierException):
    """Exception raised when the webhook answers with a non-2xx status code.

    Retryable only for 5xx responses.

    Attributes:
        status_code: HTTP status code returned by the webhook
        url: Target webhook URL
    """

    def __init__(
        self,
        status_code: int,
        url: str,
        code: str | None = None,
        details: Dict[str, Any] | None = None,
    ):
        self.status_code = status_code
        self.url = url
        super().__init__(f"unexpected status code {status_code} from {url}", code, details)

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return 500 <= self.status_code < 600
