"""Slack Bolt app factory for wordcloud-bot.

The bot token is handed to the app here and reaches the pipeline only
through the app's web client, so no other module reads it from the
environment.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from slack_bolt.async_app import AsyncApp


def build_app() -> AsyncApp:
    """Create a Bolt app from environment variables.

    We read SLACK_BOT_TOKEN/SLACK_SIGNING_SECRET via python-dotenv to keep
    secrets out of the repo.
    """

    load_dotenv()

    bot_token = os.getenv("SLACK_BOT_TOKEN")
    signing_secret = os.getenv("SLACK_SIGNING_SECRET")

    # Fail fast on missing credentials rather than on the first API call.
    if not bot_token or not signing_secret:
        raise RuntimeError("Missing SLACK_BOT_TOKEN or SLACK_SIGNING_SECRET in environment")

    logging.getLogger(__name__).info("Initializing Slack app")

    return AsyncApp(token=bot_token, signing_secret=signing_secret)


def build_socket_handler(app: AsyncApp) -> AsyncSocketModeHandler:
    """Wrap the app in a Socket Mode handler using SLACK_APP_TOKEN."""

    load_dotenv()

    app_token = os.getenv("SLACK_APP_TOKEN")
    if not app_token:
        raise RuntimeError("Missing SLACK_APP_TOKEN in environment")

    return AsyncSocketModeHandler(app, app_token)
