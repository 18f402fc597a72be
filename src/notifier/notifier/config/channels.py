# ABOUTME: Immutable channel configuration models for webhook delivery
# ABOUTME: Defines the DingTalk channel config, HTTP client settings and default templates

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, ValidationError

_HTTP_URL = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    """Validate ``value`` as an http(s) URL but keep the configured text."""
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError as e:
        raise ValueError(f"not an http(s) URL: {e.errors()[0]['msg']}") from e
    return value


WebhookURL = Annotated[str, AfterValidator(_check_http_url)]

DEFAULT_TITLE_TEMPLATE = (
    '[{{ status|upper }}{% if status == "firing" %}:{{ firing_alerts|length }}{% endif %}] '
    '{{ group_labels|dictsort|map("last")|join(" ") }}'
)

DEFAULT_MESSAGE_TEMPLATE = """\
{% for alert in alerts %}
#### {{ alert.labels.get("alertname", "alert") }} ({{ alert.status }})
{% for name, value in alert.labels|dictsort %}
- {{ name }}: {{ value }}
{% endfor %}
{% for name, value in alert.annotations|dictsort %}
- {{ name }}: {{ value }}
{% endfor %}
{% if alert.generator_url %}
[source]({{ alert.generator_url }})
{% endif %}
{% endfor %}
"""


class HTTPClientConfig(BaseModel):
    """HTTP transport settings owned by the host system.

    The channel never reads these directly; they are only used to build the
    shared ``httpx.AsyncClient`` handed to the channel.
    """

    timeout_seconds: float = Field(default=10.0, gt=0, description="Total request timeout")
    proxy_url: Optional[str] = Field(default=None, description="Proxy for outbound requests")
    verify_tls: bool = Field(default=True, description="Verify server TLS certificates")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra static request headers")

    model_config = ConfigDict(frozen=True)


class DingtalkConfig(BaseModel):
    """Configuration of one DingTalk webhook receiver.

    Built once at channel setup and shared read-only by every delivery attempt.
    """

    webhook_url: WebhookURL = Field(description="Webhook endpoint receiving the POST, used verbatim")
    title: str = Field(default=DEFAULT_TITLE_TEMPLATE, description="Title template")
    message: str = Field(default=DEFAULT_MESSAGE_TEMPLATE, description="Body template")
    http_config: HTTPClientConfig = Field(default_factory=HTTPClientConfig)

    model_config = ConfigDict(frozen=True)

    @property
    def url(self) -> str:
        return self.webhook_url
