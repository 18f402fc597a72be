# ABOUTME: Delivery client issuing webhook POST requests over an injected httpx client
# ABOUTME: Separates request construction failures from in-flight transport failures

import asyncio
from typing import Optional

import httpx
from pydantic_core import PydanticSerializationError

from notifier.config.logging import get_logger
from notifier.exceptions import NetworkError, RequestConstructionError
from notifier.models.notification import NotificationContext, WirePayload

JSON_HEADERS = {"Content-Type": "application/json"}


class DingtalkDeliveryClient:
    """
    Sends serialized payloads to a webhook and returns the response status code.

    Delivery is split into two explicit steps:

    - ``build_request`` serializes the payload and builds the POST. Any failure
      is a ``RequestConstructionError`` and is never retried.
    - ``execute`` performs the round trip. Transport failures, the context
      timeout and the context cancel event all surface as ``NetworkError``,
      which is retryable.

    The response body is drained and closed inside the round trip on every
    path, including cancellation.
    """

    def __init__(self, client: httpx.AsyncClient):
        """
        Args:
            client: Pre-built HTTP client owning TLS, proxy and connection pooling.
        """
        self._client = client
        self._logger = get_logger(__name__)

    def build_request(self, url: str, payload: WirePayload) -> httpx.Request:
        try:
            body = payload.to_json_bytes()
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise RequestConstructionError(
                f"failed to serialize payload for {url}: {e}", code="SERIALIZATION_ERROR"
            ) from e

        try:
            return self._client.build_request("POST", url, content=body, headers=JSON_HEADERS)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestConstructionError(
                f"failed to build request for {url}: {e}", code="INVALID_REQUEST", details={"url": url}
            ) from e

    async def _round_trip(self, request: httpx.Request) -> int:
        response = await self._client.send(request, stream=True)
        try:
            await response.aread()
        finally:
            await response.aclose()
        return response.status_code

    async def execute(self, request: httpx.Request, context: NotificationContext) -> int:
        """
        Send a built request, honoring the context's timeout and cancel event.

        Returns:
            int: The response status code.

        Raises:
            NetworkError: On transport failure, timeout or caller cancellation.
        """
        url = str(request.url)
        if context.cancelled:
            raise NetworkError(f"delivery to {url} cancelled before send", code="CANCELLED", details={"url": url})

        round_trip = asyncio.ensure_future(self._round_trip(request))
        cancel_waiter: Optional[asyncio.Future] = None
        waiters = {round_trip}
        if context.cancel_event is not None:
            cancel_waiter = asyncio.ensure_future(context.cancel_event.wait())
            waiters.add(cancel_waiter)

        try:
            done, _ = await asyncio.wait(waiters, timeout=context.timeout, return_when=asyncio.FIRST_COMPLETED)
        finally:
            if cancel_waiter is not None:
                cancel_waiter.cancel()
            if not round_trip.done():
                round_trip.cancel()
                await asyncio.gather(round_trip, return_exceptions=True)

        if round_trip not in done:
            if cancel_waiter is not None and cancel_waiter in done:
                raise NetworkError(f"delivery to {url} cancelled", code="CANCELLED", details={"url": url})
            raise NetworkError(
                f"delivery to {url} timed out after {context.timeout}s", code="TIMEOUT", details={"url": url}
            )

        try:
            return round_trip.result()
        except httpx.RequestError as e:
            self._logger.debug(f"Transport failure posting to {url}: {e!r}")
            raise NetworkError(
                f"request to {url} failed: {type(e).__name__}: {e}", code="TRANSPORT_ERROR", details={"url": url}
            ) from e

    async def send(self, context: NotificationContext, url: str, payload: WirePayload) -> int:
        request = self.build_request(url, payload)
        return await self.execute(request, context)
