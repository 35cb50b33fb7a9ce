"""Slack webhook sender entrypoint."""

from __future__ import annotations

from src.slack_webhook.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
