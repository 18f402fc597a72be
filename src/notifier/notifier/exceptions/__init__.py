# ABOUTME: Exceptions package exports
# ABOUTME: Exports the notifier exception taxonomy

from notifier.exceptions.base import (
    NotifierException,
    ConfigurationException,
    RenderError,
    RequestConstructionError,
    NetworkError,
    StatusError,
)

__all__ = [
    "NotifierException",
    "ConfigurationException",
    "RenderError",
    "RequestConstructionError",
    "NetworkError",
    "StatusError",
]
