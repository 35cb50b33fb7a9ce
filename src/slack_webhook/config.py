"""환경 변수/.env 기반 웹훅 설정 로더."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError
from .utils import parse_bool, parse_list

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_PATH = _PROJECT_ROOT / ".env"

# .env가 존재하면 우선 로드 (없어도 조용히 무시)
load_dotenv(_ENV_PATH, override=False)


@dataclass
class WebhookSettings:
    webhook_url: str
    channel: str = ""
    username: str = ""
    icon: str = ""
    link_names: bool = False
    unfurl_links: bool = False
    unfurl_media: bool = True
    allow_markdown: bool = True
    markdown_in_attachments: List[str] = field(default_factory=list)
    timeout: float = 10.0

    def client_defaults(self) -> Dict[str, Any]:
        """Return the defaults mapping understood by :class:`Client`."""
        return {
            "channel": self.channel,
            "username": self.username,
            "icon": self.icon,
            "link_names": self.link_names,
            "unfurl_links": self.unfurl_links,
            "unfurl_media": self.unfurl_media,
            "allow_markdown": self.allow_markdown,
            "markdown_in_attachments": list(self.markdown_in_attachments),
        }


def _env(name: str) -> str:
    return os.getenv(name, "").strip()


def _env_bool(name: str, *, default: bool) -> bool:
    try:
        return parse_bool(_env(name), default=default)
    except ValueError as exc:
        raise ConfigurationError(f"{name}: {exc}") from exc


def load_settings(webhook_url: Optional[str] = None) -> WebhookSettings:
    """Read ``SLACK_*`` variables from the environment.

    ``webhook_url`` overrides ``SLACK_WEBHOOK_URL`` when given.
    """
    url = (webhook_url or "").strip() or _env("SLACK_WEBHOOK_URL")
    if not url:
        raise ConfigurationError("SLACK_WEBHOOK_URL is not set")

    timeout_raw = _env("SLACK_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else 10.0
    except ValueError as exc:
        raise ConfigurationError(f"SLACK_TIMEOUT must be a number: {timeout_raw!r}") from exc
    if timeout <= 0:
        raise ConfigurationError("SLACK_TIMEOUT must be greater than zero")

    return WebhookSettings(
        webhook_url=url,
        channel=_env("SLACK_CHANNEL"),
        username=_env("SLACK_USERNAME"),
        icon=_env("SLACK_ICON"),
        link_names=_env_bool("SLACK_LINK_NAMES", default=False),
        unfurl_links=_env_bool("SLACK_UNFURL_LINKS", default=False),
        unfurl_media=_env_bool("SLACK_UNFURL_MEDIA", default=True),
        allow_markdown=_env_bool("SLACK_ALLOW_MARKDOWN", default=True),
        markdown_in_attachments=parse_list(_env("SLACK_MARKDOWN_IN_ATTACHMENTS")),
        timeout=timeout,
    )
