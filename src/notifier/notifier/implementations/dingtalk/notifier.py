# ABOUTME: DingTalk implementation of AbstractNotifier
# ABOUTME: Runs render, build, send and classify for one delivery attempt

from typing import Optional, Sequence, Union

import httpx
from pydantic import ValidationError

from notifier.config.channels import DingtalkConfig
from notifier.config.logging import get_logger
from notifier.config.settings import NotifierSettings, get_settings
from notifier.exceptions import NotifierException, RenderError
from notifier.implementations.dingtalk.classifier import classify_status
from notifier.implementations.dingtalk.client import DingtalkDeliveryClient
from notifier.implementations.dingtalk.payload import build_payload
from notifier.implementations.http.client_factory import new_client_from_config
from notifier.implementations.template.jinja_renderer import JinjaMessageRenderer
from notifier.interfaces.notifier import AbstractNotifier
from notifier.interfaces.renderer import AbstractMessageRenderer
from notifier.models.alert import Alert, AlertGroupView
from notifier.models.notification import DeliveryVerdict, NotificationContext, RenderedMessage
from notifier.models.types import AlertData


class DingtalkNotifier(AbstractNotifier):
    """
    DingTalk webhook notification channel.

    Each ``notify`` call moves through Rendering, Building, Sending and
    Classifying exactly once and ends in success, a retryable failure or a
    terminal failure. Templates are rendered before any network I/O, so a
    template error never reaches the webhook.

    The configuration is immutable and the HTTP client is injected, so one
    instance can serve any number of concurrent attempts.
    """

    def __init__(
        self,
        config: DingtalkConfig,
        client: httpx.AsyncClient,
        renderer: Optional[AbstractMessageRenderer] = None,
        external_url: str = "",
    ):
        """
        Initialize the DingTalk notifier.

        Args:
            config: Immutable receiver configuration.
            client: Pre-built HTTP client used for every delivery.
            renderer: Message renderer; defaults to ``JinjaMessageRenderer``.
            external_url: Link back to the alerting system, exposed to templates.
        """
        self._config = config
        self._client = client
        self._renderer = renderer or JinjaMessageRenderer()
        self._delivery = DingtalkDeliveryClient(client)
        self._external_url = external_url
        self._owns_client = False
        self._logger = get_logger(__name__)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[NotifierSettings] = None,
        renderer: Optional[AbstractMessageRenderer] = None,
    ) -> "DingtalkNotifier":
        """
        Build a notifier and its HTTP client from settings.

        The returned notifier owns the client and closes it in ``aclose``.

        Raises:
            ConfigurationException: If the settings do not describe a valid receiver.
        """
        settings = settings or get_settings()
        config = settings.to_dingtalk_config()
        notifier = cls(config, new_client_from_config(config.http_config, name="dingtalk"), renderer)
        notifier._owns_client = True
        return notifier

    @property
    def config(self) -> DingtalkConfig:
        return self._config

    def build_view(self, context: NotificationContext, alerts: Sequence[Union[Alert, AlertData]]) -> AlertGroupView:
        try:
            parsed = [alert if isinstance(alert, Alert) else Alert.model_validate(alert) for alert in alerts]
        except ValidationError as e:
            raise RenderError(
                f"invalid alert data for receiver '{context.receiver}': {e.error_count()} validation error(s)",
                code="INVALID_ALERT",
                details={"errors": e.errors(include_url=False)},
            ) from e
        return AlertGroupView.from_alerts(context.receiver, context.group_labels, parsed, self._external_url)

    def render(self, view: AlertGroupView) -> RenderedMessage:
        return self._renderer.render(view, self._config.title, self._config.message)

    async def notify(
        self,
        context: NotificationContext,
        alerts: Sequence[Union[Alert, AlertData]],
    ) -> DeliveryVerdict:
        url = self._config.url
        try:
            message = self.render(self.build_view(context, alerts))
            payload = build_payload(message)
            status_code = await self._delivery.send(context, url, payload)
        except NotifierException as e:
            verdict = DeliveryVerdict.from_error(e)
        else:
            verdict = classify_status(status_code, url)

        self._log_verdict(context, len(alerts), verdict)
        return verdict

    def _log_verdict(self, context: NotificationContext, alert_count: int, verdict: DeliveryVerdict) -> None:
        target = f"receiver '{context.receiver}' group '{context.group_key}'"
        if verdict.error is None:
            self._logger.debug(f"Delivered {alert_count} alert(s) for {target}")
        elif verdict.retryable:
            self._logger.warning(f"Retryable delivery failure for {target}: {verdict.error}")
        else:
            self._logger.error(f"Delivery failed for {target}: {verdict.error}")

    async def aclose(self) -> None:
        """Close the HTTP client if this notifier created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "DingtalkNotifier":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
