# ABOUTME: pytest configuration and shared fixtures for notifier tests
# ABOUTME: Configures per-marker timeouts and provides fake webhook transports

import asyncio
from datetime import datetime, UTC
from typing import Callable, Optional

import httpx
import pytest
import pytest_asyncio

from notifier.config.channels import DingtalkConfig
from notifier.models.alert import Alert
from notifier.models.notification import NotificationContext

WEBHOOK_URL = "https://oapi.dingtalk.com/robot/send?access_token=test-token"


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract"]):
            item.add_marker(pytest.mark.timeout(60))


class CountingStream(httpx.AsyncByteStream):
    """Response body stream that records how often it was released."""

    def __init__(self, body: bytes, tracker: "WebhookRecorder"):
        self._body = body
        self._tracker = tracker

    async def __aiter__(self):
        yield self._body

    async def aclose(self) -> None:
        self._tracker.closed_bodies += 1


class WebhookRecorder:
    """Fake webhook endpoint backed by ``httpx.MockTransport``.

    Records every request and counts response body releases.
    """

    def __init__(
        self,
        status_code: int = 200,
        body: bytes = b'{"errcode":0,"errmsg":"ok"}',
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.delay = delay
        self.requests: list[httpx.Request] = []
        self.responses_opened = 0
        self.closed_bodies = 0
        self.http_client: Optional[httpx.AsyncClient] = None

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        self.responses_opened += 1
        return httpx.Response(self.status_code, stream=CountingStream(self.body, self))

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def webhook_url() -> str:
    return WEBHOOK_URL


@pytest.fixture
def make_webhook() -> Callable[..., WebhookRecorder]:
    """Factory for fake webhook endpoints."""
    return WebhookRecorder


@pytest_asyncio.fixture
async def webhook():
    """A fake webhook answering 200, with its client closed after the test."""
    recorder = WebhookRecorder()
    recorder.http_client = recorder.client()
    yield recorder
    await recorder.http_client.aclose()


@pytest.fixture
def dingtalk_config() -> DingtalkConfig:
    return DingtalkConfig(
        webhook_url=WEBHOOK_URL,
        title='[{{ status|upper }}] {{ group_labels.get("alertname", "") }}',
        message="{% for alert in alerts %}- {{ alert.annotations.get('summary', '') }}\n{% endfor %}",
    )


@pytest.fixture
def context() -> NotificationContext:
    return NotificationContext(
        receiver="ops-team",
        group_labels={"alertname": "HighCPU"},
        group_key="{}:{alertname=\"HighCPU\"}",
        timeout=5.0,
    )


@pytest.fixture
def alerts() -> list[Alert]:
    started = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    return [
        Alert(
            labels={"alertname": "HighCPU", "instance": "web-1", "severity": "critical"},
            annotations={"summary": "CPU above 90% on web-1"},
            starts_at=started,
            generator_url="http://prometheus.local/graph?g0.expr=cpu",
        ),
        Alert(
            labels={"alertname": "HighCPU", "instance": "web-2", "severity": "critical"},
            annotations={"summary": "CPU above 90% on web-2"},
            starts_at=started,
        ),
    ]
