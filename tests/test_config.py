import pytest

from src.slack_webhook.client import Client
from src.slack_webhook.config import WebhookSettings, load_settings
from src.slack_webhook.errors import ConfigurationError

_VARIABLES = (
    "SLACK_WEBHOOK_URL",
    "SLACK_CHANNEL",
    "SLACK_USERNAME",
    "SLACK_ICON",
    "SLACK_LINK_NAMES",
    "SLACK_UNFURL_LINKS",
    "SLACK_UNFURL_MEDIA",
    "SLACK_ALLOW_MARKDOWN",
    "SLACK_MARKDOWN_IN_ATTACHMENTS",
    "SLACK_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARIABLES:
        monkeypatch.delenv(name, raising=False)


def test_load_settings_defaults(monkeypatch):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.test/abc")

    settings = load_settings()

    assert settings == WebhookSettings(webhook_url="https://hooks.slack.test/abc")
    assert settings.unfurl_media is True
    assert settings.allow_markdown is True
    assert settings.timeout == 10.0


def test_load_settings_reads_all_variables(monkeypatch):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.test/abc")
    monkeypatch.setenv("SLACK_CHANNEL", "#ops")
    monkeypatch.setenv("SLACK_USERNAME", "watchbot")
    monkeypatch.setenv("SLACK_ICON", ":robot_face:")
    monkeypatch.setenv("SLACK_LINK_NAMES", "yes")
    monkeypatch.setenv("SLACK_UNFURL_LINKS", "1")
    monkeypatch.setenv("SLACK_UNFURL_MEDIA", "off")
    monkeypatch.setenv("SLACK_ALLOW_MARKDOWN", "false")
    monkeypatch.setenv("SLACK_MARKDOWN_IN_ATTACHMENTS", "text, pretext,,fields")
    monkeypatch.setenv("SLACK_TIMEOUT", "2.5")

    settings = load_settings()

    assert settings.channel == "#ops"
    assert settings.username == "watchbot"
    assert settings.icon == ":robot_face:"
    assert settings.link_names is True
    assert settings.unfurl_links is True
    assert settings.unfurl_media is False
    assert settings.allow_markdown is False
    assert settings.markdown_in_attachments == ["text", "pretext", "fields"]
    assert settings.timeout == 2.5


def test_explicit_url_overrides_environment(monkeypatch):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.test/env")

    assert load_settings("https://hooks.slack.test/cli").webhook_url == "https://hooks.slack.test/cli"


def test_missing_url_raises():
    with pytest.raises(ConfigurationError, match="SLACK_WEBHOOK_URL"):
        load_settings()


@pytest.mark.parametrize(
    ("name", "value"),
    [("SLACK_LINK_NAMES", "maybe"), ("SLACK_TIMEOUT", "soon"), ("SLACK_TIMEOUT", "0")],
)
def test_malformed_values_raise(monkeypatch, name, value):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.test/abc")
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError, match=name):
        load_settings()


def test_client_from_env(monkeypatch, fake_session):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.test/abc")
    monkeypatch.setenv("SLACK_CHANNEL", "#ops")
    monkeypatch.setenv("SLACK_LINK_NAMES", "true")
    monkeypatch.setenv("SLACK_TIMEOUT", "4")

    client = Client.from_env(session=fake_session)

    assert client.endpoint == "https://hooks.slack.test/abc"
    assert client.session is fake_session
    assert client.timeout == 4.0
    assert client.link_names is True
    assert client.create_message().channel == "#ops"
