# ABOUTME: Outcome classifier for webhook responses
# ABOUTME: Maps an HTTP status code onto a retryable or terminal delivery verdict

from notifier.exceptions import StatusError
from notifier.models.notification import DeliveryVerdict


def classify_status(status_code: int, url: str) -> DeliveryVerdict:
    """
    Classify a webhook response status code.

    Webhooks are assumed to answer 2xx on success. A 5xx answer is a
    server-side condition worth retrying. Every other code, including 1xx, 3xx
    and values outside 100..599, is terminal.

    Args:
        status_code: HTTP status code returned by the webhook.
        url: Target URL, included in the error message.

    Returns:
        DeliveryVerdict: ``(False, None)`` for 2xx, otherwise a verdict carrying
            a ``StatusError``.
    """
    if 200 <= status_code < 300:
        return DeliveryVerdict.success()
    return DeliveryVerdict.from_error(StatusError(status_code, url))
