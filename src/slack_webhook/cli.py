"""Command-line entrypoint for posting a message to a Slack webhook."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import requests

from .client import Client
from .config import load_settings
from .errors import SlackWebhookError

logger = logging.getLogger("slack_webhook.cli")


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger("slack_webhook")
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[slack_webhook] %(message)s"))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slack-webhook",
        description="Post a message to a Slack incoming webhook.",
    )
    parser.add_argument("text", help="message text")
    parser.add_argument("--channel", help="override the default channel")
    parser.add_argument("--username", help="override the default username")
    parser.add_argument("--icon", help="emoji shortcode (:ghost:) or image URL")
    parser.add_argument("--endpoint", help="webhook URL (defaults to SLACK_WEBHOOK_URL)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log request details")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        client = Client.from_settings(load_settings(args.endpoint))
        message = client.create_message()
        if args.channel:
            message.to(args.channel)
        if args.username:
            message.from_(args.username)
        if args.icon:
            message.with_icon(args.icon)
        message.send(args.text)
    except (SlackWebhookError, requests.RequestException) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info("Message sent to %s", message.channel or "default channel")
    return 0
