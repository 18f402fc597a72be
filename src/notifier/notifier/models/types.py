# ABOUTME: Common type definitions for improved type safety across the notifier
# ABOUTME: Provides TypedDict classes and type aliases for alert and label data

from typing import TypedDict, Any, Union, Optional
from datetime import datetime


class AlertData(TypedDict, total=False):
    """Type definition for raw alert data accepted by ``Alert.model_validate``.

    All fields are optional; missing labels and annotations default to empty.
    """

    labels: dict[str, str]
    annotations: dict[str, str]
    starts_at: Union[str, datetime]
    ends_at: Optional[Union[str, datetime]]
    generator_url: str
    fingerprint: str


class TemplateAlert(TypedDict):
    """Type definition for a single alert as exposed to message templates."""

    status: str
    labels: dict[str, str]
    annotations: dict[str, str]
    starts_at: datetime
    ends_at: Optional[datetime]
    generator_url: str
    fingerprint: str


# Type aliases for commonly used types
LabelSet = dict[str, str]
TemplateContext = dict[str, Any]
