"""Builder-style client for Slack incoming webhooks."""

from .attachments import ActionConfirmation, Attachment, AttachmentAction, AttachmentField
from .client import Client
from .errors import ConfigurationError, PayloadEncodingError, SlackWebhookError
from .message import Message

__all__ = [
    "ActionConfirmation",
    "Attachment",
    "AttachmentAction",
    "AttachmentField",
    "Client",
    "Message",
    "SlackWebhookError",
    "PayloadEncodingError",
    "ConfigurationError",
]
