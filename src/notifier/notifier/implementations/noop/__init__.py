# ABOUTME: No-operation implementations package
# ABOUTME: Exports the silent notifier

from .notifier import NoOpNotifier

__all__ = [
    "NoOpNotifier",
]
