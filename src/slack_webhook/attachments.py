"""Attachment builders for Slack incoming-webhook messages.

Each builder holds the display attributes of one piece of a message card and
serializes them with :meth:`to_dict` using the wire names of the webhook
schema.  Builders can be created directly, or from a keyed mapping with
``from_dict``; unknown keys are ignored and ``None`` values keep the default.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .utils import TimestampLike, coerce_timestamp, epoch_seconds


def _present(attributes: Mapping[str, Any], key: str) -> bool:
    return attributes.get(key) is not None


@dataclass
class AttachmentField:
    """A title/value pair rendered as a table cell inside an attachment."""

    title: str = ""
    value: str = ""
    short: bool = False

    @classmethod
    def from_dict(cls, attributes: Mapping[str, Any]) -> "AttachmentField":
        instance = cls()
        if _present(attributes, "title"):
            instance.set_title(attributes["title"])
        if _present(attributes, "value"):
            instance.set_value(attributes["value"])
        if _present(attributes, "short"):
            instance.set_short(attributes["short"])
        return instance

    def set_title(self, title: str) -> "AttachmentField":
        self.title = title
        return self

    def set_value(self, value: str) -> "AttachmentField":
        self.value = value
        return self

    def set_short(self, short: Any) -> "AttachmentField":
        self.short = bool(short)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass
class ActionConfirmation:
    """Confirmation dialog shown before an action button is submitted."""

    title: str = ""
    text: str = ""
    ok_text: str = ""
    dismiss_text: str = ""

    @classmethod
    def from_dict(cls, attributes: Mapping[str, Any]) -> "ActionConfirmation":
        instance = cls()
        for key in ("title", "text", "ok_text", "dismiss_text"):
            if _present(attributes, key):
                setattr(instance, key, attributes[key])
        return instance

    def set_title(self, title: str) -> "ActionConfirmation":
        self.title = title
        return self

    def set_text(self, text: str) -> "ActionConfirmation":
        self.text = text
        return self

    def set_ok_text(self, ok_text: str) -> "ActionConfirmation":
        self.ok_text = ok_text
        return self

    def set_dismiss_text(self, dismiss_text: str) -> "ActionConfirmation":
        self.dismiss_text = dismiss_text
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "text": self.text,
            "ok_text": self.ok_text,
            "dismiss_text": self.dismiss_text,
        }


ConfirmationLike = Union[ActionConfirmation, Mapping[str, Any]]


@dataclass
class AttachmentAction:
    """An interactive button rendered within an attachment."""

    TYPE_BUTTON = "button"

    STYLE_DEFAULT = "default"
    STYLE_PRIMARY = "primary"
    STYLE_DANGER = "danger"

    name: str = ""
    text: str = ""
    style: str = STYLE_DEFAULT
    type: str = TYPE_BUTTON
    value: str = ""
    confirm: ActionConfirmation = field(default_factory=ActionConfirmation)

    @classmethod
    def from_dict(cls, attributes: Mapping[str, Any]) -> "AttachmentAction":
        instance = cls()
        for key in ("name", "text", "style", "type", "value"):
            if _present(attributes, key):
                setattr(instance, key, attributes[key])
        if _present(attributes, "confirm"):
            instance.set_confirm(attributes["confirm"])
        return instance

    def set_name(self, name: str) -> "AttachmentAction":
        self.name = name
        return self

    def set_text(self, text: str) -> "AttachmentAction":
        self.text = text
        return self

    def set_style(self, style: str) -> "AttachmentAction":
        self.style = style
        return self

    def set_type(self, type_: str) -> "AttachmentAction":
        self.type = type_
        return self

    def set_value(self, value: str) -> "AttachmentAction":
        self.value = value
        return self

    def set_confirm(self, confirm: ConfirmationLike) -> "AttachmentAction":
        if isinstance(confirm, ActionConfirmation):
            self.confirm = confirm
        else:
            self.confirm = ActionConfirmation.from_dict(confirm)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "text": self.text,
            "style": self.style,
            "type": self.type,
            "value": self.value,
            "confirm": self.confirm.to_dict(),
        }


FieldLike = Union[AttachmentField, Mapping[str, Any]]
ActionLike = Union[AttachmentAction, Mapping[str, Any]]

# Configuration keys that map straight onto an optional string attribute.
_TEXT_KEYS = (
    "fallback",
    "text",
    "pretext",
    "color",
    "footer",
    "footer_icon",
    "image_url",
    "thumb_url",
    "title",
    "title_link",
    "author_name",
    "author_link",
    "author_icon",
)


@dataclass
class Attachment:
    """A rich-content card embedded in a message.

    Unset optional strings serialize as ``None`` so every key of the webhook
    schema is present in :meth:`to_dict`.  ``fields`` and ``actions`` render in
    insertion order.
    """

    fallback: Optional[str] = None
    text: Optional[str] = None
    pretext: Optional[str] = None
    color: Optional[str] = "good"
    footer: Optional[str] = None
    footer_icon: Optional[str] = None
    timestamp: Optional[datetime] = None
    image_url: Optional[str] = None
    thumb_url: Optional[str] = None
    title: Optional[str] = None
    title_link: Optional[str] = None
    author_name: Optional[str] = None
    author_link: Optional[str] = None
    author_icon: Optional[str] = None
    fields: List[AttachmentField] = field(default_factory=list)
    markdown_fields: List[str] = field(default_factory=list)
    actions: List[AttachmentAction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, attributes: Mapping[str, Any]) -> "Attachment":
        instance = cls()
        for key in _TEXT_KEYS:
            if _present(attributes, key):
                setattr(instance, key, attributes[key])
        if _present(attributes, "timestamp"):
            instance.set_timestamp(attributes["timestamp"])
        if _present(attributes, "fields"):
            instance.set_fields(attributes["fields"])
        if _present(attributes, "mrkdwn_in"):
            instance.set_markdown_fields(attributes["mrkdwn_in"])
        if _present(attributes, "actions"):
            instance.set_actions(attributes["actions"])
        return instance

    def set_fallback(self, fallback: str) -> "Attachment":
        self.fallback = fallback
        return self

    def set_text(self, text: str) -> "Attachment":
        self.text = text
        return self

    def set_pretext(self, pretext: str) -> "Attachment":
        self.pretext = pretext
        return self

    def set_color(self, color: str) -> "Attachment":
        self.color = color
        return self

    def set_footer(self, footer: str) -> "Attachment":
        self.footer = footer
        return self

    def set_footer_icon(self, footer_icon: str) -> "Attachment":
        self.footer_icon = footer_icon
        return self

    def set_timestamp(self, timestamp: Optional[TimestampLike]) -> "Attachment":
        self.timestamp = coerce_timestamp(timestamp)
        return self

    def set_image_url(self, image_url: str) -> "Attachment":
        self.image_url = image_url
        return self

    def set_thumb_url(self, thumb_url: str) -> "Attachment":
        self.thumb_url = thumb_url
        return self

    def set_title(self, title: str) -> "Attachment":
        self.title = title
        return self

    def set_title_link(self, title_link: str) -> "Attachment":
        self.title_link = title_link
        return self

    def set_author_name(self, author_name: str) -> "Attachment":
        self.author_name = author_name
        return self

    def set_author_link(self, author_link: str) -> "Attachment":
        self.author_link = author_link
        return self

    def set_author_icon(self, author_icon: str) -> "Attachment":
        self.author_icon = author_icon
        return self

    def set_markdown_fields(self, names: Iterable[str]) -> "Attachment":
        self.markdown_fields = list(names)
        return self

    def set_fields(self, fields: Iterable[FieldLike]) -> "Attachment":
        self.clear_fields()
        for item in fields:
            self.add_field(item)
        return self

    def add_field(self, item: FieldLike) -> "Attachment":
        if not isinstance(item, AttachmentField):
            item = AttachmentField.from_dict(item)
        self.fields.append(item)
        return self

    def clear_fields(self) -> "Attachment":
        self.fields = []
        return self

    def set_actions(self, actions: Iterable[ActionLike]) -> "Attachment":
        self.clear_actions()
        for item in actions:
            self.add_action(item)
        return self

    def add_action(self, item: ActionLike) -> "Attachment":
        if not isinstance(item, AttachmentAction):
            item = AttachmentAction.from_dict(item)
        self.actions.append(item)
        return self

    def clear_actions(self) -> "Attachment":
        self.actions = []
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fallback": self.fallback,
            "text": self.text,
            "pretext": self.pretext,
            "color": self.color,
            "footer": self.footer,
            "footer_icon": self.footer_icon,
            "ts": epoch_seconds(self.timestamp),
            "mrkdwn_in": list(self.markdown_fields),
            "image_url": self.image_url,
            "thumb_url": self.thumb_url,
            "title": self.title,
            "title_link": self.title_link,
            "author_name": self.author_name,
            "author_link": self.author_link,
            "author_icon": self.author_icon,
            "fields": [item.to_dict() for item in self.fields],
            "actions": [item.to_dict() for item in self.actions],
        }
