# ABOUTME: Interfaces package exports
# ABOUTME: Exports abstract classes for message rendering and notification delivery

from .renderer import AbstractMessageRenderer
from .notifier import AbstractNotifier

__all__ = [
    "AbstractMessageRenderer",
    "AbstractNotifier",
]
