import pytest

from src.slack_webhook.attachments import Attachment
from src.slack_webhook.client import Client
from src.slack_webhook.message import Message


@pytest.fixture
def message(fake_session):
    return Message(Client("http://fake.endpoint", session=fake_session))


@pytest.mark.parametrize(
    ("icon", "expected"),
    [
        (":ghost:", Message.ICON_TYPE_EMOJI),
        (" :ghost: ", Message.ICON_TYPE_EMOJI),
        (":", Message.ICON_TYPE_EMOJI),
        ("http://example.com/x.png", Message.ICON_TYPE_URL),
        (":not-closed", Message.ICON_TYPE_URL),
    ],
)
def test_icon_type_is_inferred(message, icon, expected):
    message.set_icon(icon)

    assert message.icon == icon
    assert message.icon_type == expected


@pytest.mark.parametrize("empty", ["", None])
def test_empty_icon_clears_icon_and_type(message, empty):
    message.set_icon(":ghost:")
    message.set_icon(empty)

    assert message.icon is None
    assert message.icon_type is None


def test_icon_type_recomputed_on_assignment(message):
    message.icon = ":ghost:"
    message.icon = "https://example.com/a.png"

    assert message.icon_type == Message.ICON_TYPE_URL


def test_fluent_helpers(message):
    result = message.to("#general").from_("Archer").with_icon(":ghost:").disable_markdown()

    assert result is message
    assert message.channel == "#general"
    assert message.username == "Archer"
    assert message.allow_markdown is False
    assert message.enable_markdown().allow_markdown is True


def test_attach_mapping_inherits_markdown_fields(message):
    message.set_markdown_in_attachments(["text"])
    message.attach({"text": "inherits"})
    message.attach({"text": "overrides", "mrkdwn_in": ["pretext"]})

    assert message.attachments[0].markdown_fields == ["text"]
    assert message.attachments[1].markdown_fields == ["pretext"]


def test_inherited_markdown_fields_are_copied_at_attach_time(message):
    message.set_markdown_in_attachments(["text"])
    message.attach({"text": "first"})

    message.set_markdown_in_attachments(["fields"])
    message.markdown_in_attachments.append("pretext")

    assert message.attachments[0].markdown_fields == ["text"]


def test_attach_instance_is_kept_as_is(message):
    message.set_markdown_in_attachments(["text"])
    attachment = Attachment(text="built")
    message.attach(attachment)

    assert message.attachments == [attachment]
    assert attachment.markdown_fields == []


def test_set_attachments_replaces_in_order(message):
    message.attach({"text": "old"})
    message.set_attachments([{"text": "a"}, Attachment(text="b")])

    assert [item.text for item in message.attachments] == ["a", "b"]
    assert message.clear_attachments().attachments == []


def test_send_overwrites_text_and_posts_once(message, fake_session):
    message.set_text("draft")

    assert message.send("final") is message
    assert message.text == "final"
    assert len(fake_session.calls) == 1


def test_send_without_text_keeps_existing(message, fake_session):
    message.set_text("keep me").send()

    assert message.text == "keep me"
    assert len(fake_session.calls) == 1
