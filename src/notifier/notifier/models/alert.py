# ABOUTME: Alert and AlertGroupView models consumed by the message renderer
# ABOUTME: Builds the per-attempt template data view from a group of alerts

import hashlib
from datetime import datetime, UTC
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from notifier.models.types import LabelSet, TemplateAlert, TemplateContext


class AlertStatus(str, Enum):
    """Alert status enumeration."""

    FIRING = "firing"
    RESOLVED = "resolved"


def fingerprint_labels(labels: LabelSet) -> str:
    """Return a stable 16-character hex fingerprint for a label set."""
    digest = hashlib.sha256()
    for name in sorted(labels):
        digest.update(str(name).encode("utf-8"))
        digest.update(b"\xff")
        digest.update(str(labels[name]).encode("utf-8"))
        digest.update(b"\xff")
    return digest.hexdigest()[:16]


class Alert(BaseModel):
    """
    A single alert as handed to the channel by the dispatcher.

    An alert is resolved once its ``ends_at`` lies in the past; otherwise it is
    firing. The fingerprint is derived from the labels when not supplied.
    """

    labels: LabelSet = Field(default_factory=dict, description="Identifying labels")
    annotations: LabelSet = Field(default_factory=dict, description="Informational annotations")
    starts_at: datetime = Field(default_factory=lambda: datetime.now(UTC), description="When the alert started firing")
    ends_at: Optional[datetime] = Field(default=None, description="When the alert resolved, if it has")
    generator_url: str = Field(default="", description="Link back to the alert source")
    fingerprint: str = Field(default="", description="Stable identifier derived from labels")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def fill_fingerprint(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("fingerprint"):
            labels = data.get("labels") or {}
            if isinstance(labels, dict):
                data = {**data, "fingerprint": fingerprint_labels(labels)}
        return data

    @property
    def name(self) -> str:
        return self.labels.get("alertname", "")

    def status_at(self, now: Optional[datetime] = None) -> AlertStatus:
        """Return the alert status relative to ``now`` (defaults to current UTC time)."""
        if self.ends_at is None:
            return AlertStatus.FIRING
        now = now or datetime.now(UTC)
        ends_at = self.ends_at if self.ends_at.tzinfo else self.ends_at.replace(tzinfo=UTC)
        return AlertStatus.RESOLVED if ends_at <= now else AlertStatus.FIRING

    @property
    def status(self) -> AlertStatus:
        return self.status_at()

    def to_template_dict(self, now: Optional[datetime] = None) -> TemplateAlert:
        return {
            "status": self.status_at(now).value,
            "labels": dict(self.labels),
            "annotations": dict(self.annotations),
            "starts_at": self.starts_at,
            "ends_at": self.ends_at,
            "generator_url": self.generator_url,
            "fingerprint": self.fingerprint,
        }


def _common_pairs(sets: list[LabelSet]) -> LabelSet:
    if not sets:
        return {}
    common = dict(sets[0])
    for label_set in sets[1:]:
        common = {k: v for k, v in common.items() if label_set.get(k) == v}
    return common


class AlertGroupView(BaseModel):
    """
    Template data view for one delivery attempt.

    Built fresh from the alerts passed to a single ``notify`` call and consumed
    only by the renderer. The group is firing if any of its alerts fires.
    """

    receiver: str = Field(description="Name of the configured receiver")
    status: AlertStatus = Field(description="Aggregate status of the group")
    alerts: list[dict[str, Any]] = Field(default_factory=list, description="Alerts in the group")
    group_labels: LabelSet = Field(default_factory=dict, description="Labels the group was formed by")
    common_labels: LabelSet = Field(default_factory=dict, description="Label pairs shared by every alert")
    common_annotations: LabelSet = Field(default_factory=dict, description="Annotation pairs shared by every alert")
    external_url: str = Field(default="", description="Link back to the alerting system")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_alerts(
        cls,
        receiver: str,
        group_labels: LabelSet,
        alerts: list[Alert],
        external_url: str = "",
        now: Optional[datetime] = None,
    ) -> "AlertGroupView":
        now = now or datetime.now(UTC)
        rendered = [alert.to_template_dict(now) for alert in alerts]
        firing = any(alert["status"] == AlertStatus.FIRING.value for alert in rendered)
        return cls(
            receiver=receiver,
            status=AlertStatus.FIRING if firing else AlertStatus.RESOLVED,
            alerts=rendered,
            group_labels=dict(group_labels),
            common_labels=_common_pairs([alert.labels for alert in alerts]),
            common_annotations=_common_pairs([alert.annotations for alert in alerts]),
            external_url=external_url,
        )

    @property
    def firing_alerts(self) -> list[TemplateAlert]:
        return [a for a in self.alerts if a["status"] == AlertStatus.FIRING.value]

    @property
    def resolved_alerts(self) -> list[TemplateAlert]:
        return [a for a in self.alerts if a["status"] == AlertStatus.RESOLVED.value]

    def as_template_context(self) -> TemplateContext:
        """Flatten the view into the variables exposed to message templates."""
        return {
            "receiver": self.receiver,
            "status": self.status.value,
            "alerts": list(self.alerts),
            "firing_alerts": self.firing_alerts,
            "resolved_alerts": self.resolved_alerts,
            "group_labels": dict(self.group_labels),
            "common_labels": dict(self.common_labels),
            "common_annotations": dict(self.common_annotations),
            "external_url": self.external_url,
        }
