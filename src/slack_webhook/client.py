"""Slack incoming-webhook client."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional

import requests

from .errors import PayloadEncodingError
from .message import AttachmentLike, Message

if TYPE_CHECKING:
    from .config import WebhookSettings

logger = logging.getLogger("slack_webhook.client")


class Client:
    """Holds the webhook endpoint and message defaults, and posts payloads.

    ``defaults`` recognizes ``channel``, ``username``, ``icon``, ``link_names``,
    ``unfurl_links``, ``unfurl_media``, ``allow_markdown`` and
    ``markdown_in_attachments``; any other key is ignored.
    """

    def __init__(
        self,
        endpoint: str,
        defaults: Optional[Mapping[str, Any]] = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ) -> None:
        self.endpoint = endpoint
        self.default_channel = ""
        self.default_username = ""
        self.default_icon = ""
        self.link_names = False
        self.unfurl_links = False
        self.unfurl_media = True
        self.allow_markdown = True
        self.markdown_in_attachments: List[str] = []
        self.timeout = timeout
        self._session = session or requests.Session()

        attributes = defaults or {}
        if attributes.get("channel") is not None:
            self.set_default_channel(attributes["channel"])
        if attributes.get("username") is not None:
            self.set_default_username(attributes["username"])
        if attributes.get("icon") is not None:
            self.set_default_icon(attributes["icon"])
        if attributes.get("link_names") is not None:
            self.set_link_names(attributes["link_names"])
        if attributes.get("unfurl_links") is not None:
            self.set_unfurl_links(attributes["unfurl_links"])
        if attributes.get("unfurl_media") is not None:
            self.set_unfurl_media(attributes["unfurl_media"])
        if attributes.get("allow_markdown") is not None:
            self.set_allow_markdown(attributes["allow_markdown"])
        if attributes.get("markdown_in_attachments") is not None:
            self.set_markdown_in_attachments(attributes["markdown_in_attachments"])

    @classmethod
    def from_settings(
        cls,
        settings: "WebhookSettings",
        *,
        session: Optional[requests.Session] = None,
    ) -> "Client":
        return cls(
            settings.webhook_url,
            settings.client_defaults(),
            session=session,
            timeout=settings.timeout,
        )

    @classmethod
    def from_env(cls, *, session: Optional[requests.Session] = None) -> "Client":
        """Build a client from ``SLACK_*`` environment variables (and ``.env``)."""
        from .config import load_settings

        return cls.from_settings(load_settings(), session=session)

    @property
    def session(self) -> requests.Session:
        return self._session

    def set_endpoint(self, endpoint: str) -> None:
        self.endpoint = endpoint

    def set_default_channel(self, channel: str) -> None:
        self.default_channel = channel

    def set_default_username(self, username: str) -> None:
        self.default_username = username

    def set_default_icon(self, icon: str) -> None:
        self.default_icon = icon

    def set_link_names(self, value: bool) -> None:
        self.link_names = bool(value)

    def set_unfurl_links(self, value: bool) -> None:
        self.unfurl_links = bool(value)

    def set_unfurl_media(self, value: bool) -> None:
        self.unfurl_media = bool(value)

    def set_allow_markdown(self, value: bool) -> None:
        self.allow_markdown = bool(value)

    def set_markdown_in_attachments(self, names: Iterable[str]) -> None:
        self.markdown_in_attachments = list(names)

    def create_message(self) -> Message:
        """Return a new message seeded with this client's defaults."""
        message = Message(self)
        message.set_channel(self.default_channel)
        message.set_username(self.default_username)
        message.set_icon(self.default_icon)
        message.set_allow_markdown(self.allow_markdown)
        message.set_markdown_in_attachments(self.markdown_in_attachments)
        return message

    # Shorthands for ``create_message().<method>(...)``.

    def to(self, channel: str) -> Message:
        return self.create_message().to(channel)

    def from_(self, username: str) -> Message:
        return self.create_message().from_(username)

    def with_icon(self, icon: Optional[str]) -> Message:
        return self.create_message().with_icon(icon)

    def attach(self, attachment: AttachmentLike) -> Message:
        return self.create_message().attach(attachment)

    def send(self, text: Optional[str] = None) -> Message:
        return self.create_message().send(text)

    def prepare_payload(self, message: Message) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "text": message.text,
            "channel": message.channel,
            "username": message.username,
            "link_names": 1 if self.link_names else 0,
            "unfurl_links": self.unfurl_links,
            "unfurl_media": self.unfurl_media,
            "mrkdwn": message.allow_markdown,
        }
        if message.icon:
            payload[message.icon_type] = message.icon
        payload["attachments"] = [attachment.to_dict() for attachment in message.attachments]
        return payload

    def encode_payload(self, payload: Mapping[str, Any]) -> bytes:
        try:
            return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise PayloadEncodingError(f"JSON encoding error: {exc}") from exc

    def send_message(self, message: Message) -> None:
        """Serialize ``message`` and POST it to the webhook endpoint once.

        Raises:
            PayloadEncodingError: the payload is not representable as UTF-8 JSON.
            requests.RequestException: transport failure or a 4xx/5xx response.
        """
        payload = self.prepare_payload(message)
        body = self.encode_payload(payload)
        logger.debug(
            "Posting message to channel=%r (%d attachments, %d bytes)",
            message.channel,
            len(message.attachments),
            len(body),
        )
        try:
            response = self._session.post(self.endpoint, data=body, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException:
            logger.exception("Slack webhook delivery failed for channel=%r", message.channel)
            raise
        logger.debug("Slack webhook accepted message (HTTP %s)", response.status_code)
