"""Outbound message builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Mapping, Optional, Union

from .attachments import Attachment

if TYPE_CHECKING:
    from .client import Client

AttachmentLike = Union[Attachment, Mapping[str, Any]]


class Message:
    """Accumulates the content of one message and delegates delivery to a client."""

    ICON_TYPE_URL = "icon_url"
    ICON_TYPE_EMOJI = "icon_emoji"

    def __init__(self, client: "Client") -> None:
        self._client = client
        self.text = ""
        self.channel = ""
        self.username = ""
        self._icon: Optional[str] = None
        self._icon_type: Optional[str] = None
        self.allow_markdown = True
        self.markdown_in_attachments: List[str] = []
        self.attachments: List[Attachment] = []

    @property
    def client(self) -> "Client":
        return self._client

    @property
    def icon(self) -> Optional[str]:
        return self._icon

    @icon.setter
    def icon(self, value: Optional[str]) -> None:
        if not value:
            self._icon = self._icon_type = None
            return
        stripped = value.strip()
        # ":ghost:" is an emoji shortcode; anything else is treated as an image URL.
        if stripped.startswith(":") and stripped.endswith(":"):
            self._icon_type = self.ICON_TYPE_EMOJI
        else:
            self._icon_type = self.ICON_TYPE_URL
        self._icon = value

    @property
    def icon_type(self) -> Optional[str]:
        return self._icon_type

    def set_text(self, text: str) -> "Message":
        self.text = text
        return self

    def set_channel(self, channel: str) -> "Message":
        self.channel = channel
        return self

    def set_username(self, username: str) -> "Message":
        self.username = username
        return self

    def set_icon(self, icon: Optional[str]) -> "Message":
        self.icon = icon
        return self

    def set_allow_markdown(self, value: bool) -> "Message":
        self.allow_markdown = bool(value)
        return self

    def enable_markdown(self) -> "Message":
        return self.set_allow_markdown(True)

    def disable_markdown(self) -> "Message":
        return self.set_allow_markdown(False)

    def set_markdown_in_attachments(self, names: Iterable[str]) -> "Message":
        self.markdown_in_attachments = list(names)
        return self

    def to(self, channel: str) -> "Message":
        return self.set_channel(channel)

    def from_(self, username: str) -> "Message":
        return self.set_username(username)

    def with_icon(self, icon: Optional[str]) -> "Message":
        return self.set_icon(icon)

    def attach(self, attachment: AttachmentLike) -> "Message":
        """Append an attachment, building it from a mapping when needed.

        A mapping without ``mrkdwn_in`` inherits a copy of this message's
        ``markdown_in_attachments`` as it stands right now.
        """
        if isinstance(attachment, Attachment):
            self.attachments.append(attachment)
            return self
        built = Attachment.from_dict(attachment)
        if attachment.get("mrkdwn_in") is None:
            built.set_markdown_fields(self.markdown_in_attachments)
        self.attachments.append(built)
        return self

    def set_attachments(self, attachments: Iterable[AttachmentLike]) -> "Message":
        self.clear_attachments()
        for attachment in attachments:
            self.attach(attachment)
        return self

    def clear_attachments(self) -> "Message":
        self.attachments = []
        return self

    def send(self, text: Optional[str] = None) -> "Message":
        """Deliver the message through the owning client, optionally replacing its text."""
        if text:
            self.set_text(text)
        self._client.send_message(self)
        return self

    def __repr__(self) -> str:
        return (
            f"Message(channel={self.channel!r}, username={self.username!r}, "
            f"attachments={len(self.attachments)})"
        )
