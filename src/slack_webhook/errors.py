"""Shared exception types for the Slack webhook client."""

from __future__ import annotations


class SlackWebhookError(RuntimeError):
    """Base class for errors raised by this package."""


class PayloadEncodingError(SlackWebhookError):
    """Raised when a message payload cannot be encoded as UTF-8 JSON."""


class ConfigurationError(SlackWebhookError):
    """Raised when webhook settings are missing or malformed."""
