"""Global `word_cloud` shortcut that opens the date range modal."""

from __future__ import annotations

import logging

from slack_bolt.async_app import AsyncApp

CALLBACK_ID = "word_cloud"

OLDEST_BLOCK_ID = "oldest_date_block_id"
OLDEST_ACTION_ID = "oldest_date_id"
NEWEST_BLOCK_ID = "newest_date_block_id"
NEWEST_ACTION_ID = "newest_date_id"
CHANNEL_BLOCK_ID = "select_channel_block_id"
CHANNEL_ACTION_ID = "channel_select_id"

LOGGER = logging.getLogger(__name__)


def _date_input(block_id: str, action_id: str, label: str) -> dict:
    return {
        "type": "input",
        "optional": True,
        "block_id": block_id,
        "label": {"type": "plain_text", "text": label},
        "element": {
            "type": "plain_text_input",
            "action_id": action_id,
            "multiline": False,
        },
    }


def build_word_cloud_modal() -> dict:
    """Return the modal view asking for a date range and target channel."""

    return {
        "type": "modal",
        "callback_id": CALLBACK_ID,
        "title": {"type": "plain_text", "text": "Generate a Word Cloud ☁️"},
        "blocks": [
            _date_input(OLDEST_BLOCK_ID, OLDEST_ACTION_ID, "Oldest Date [YYYY-MM-DD]"),
            _date_input(NEWEST_BLOCK_ID, NEWEST_ACTION_ID, "Newest Date [YYYY-MM-DD]"),
            {
                "type": "input",
                "block_id": CHANNEL_BLOCK_ID,
                "label": {
                    "type": "plain_text",
                    "text": "Select a channel to message the result to",
                },
                "element": {
                    "type": "conversations_select",
                    "action_id": CHANNEL_ACTION_ID,
                    "response_url_enabled": True,
                },
            },
        ],
        "submit": {"type": "plain_text", "text": "Submit"},
    }


def register(app: AsyncApp) -> None:
    async def word_cloud_shortcut(ack, shortcut, client) -> None:
        await ack()
        try:
            await client.views_open(trigger_id=shortcut["trigger_id"], view=build_word_cloud_modal())
        except Exception:
            LOGGER.exception("Failed to open word cloud modal")

    app.shortcut(CALLBACK_ID)(word_cloud_shortcut)
