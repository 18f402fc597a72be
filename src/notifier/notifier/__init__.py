# ABOUTME: Notifier package initialization for webhook notification channels
# ABOUTME: Provides alert rendering, webhook delivery and retry classification

"""
Webhook notification channel package.

This package renders alert groups into messages and delivers them to webhook
endpoints. Each delivery attempt is classified into a retryable or terminal
outcome so that an outer dispatcher can decide whether to try again.
"""

__version__ = "0.1.0"
