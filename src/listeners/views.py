"""Submission handler for the `word_cloud` modal."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from slack_bolt.async_app import AsyncApp

from adapters.slack_notifier import ChannelNotifier
from core.models import WordCloudRequest
from core.pipeline import WordCloudPipeline
from listeners.shortcuts import (
    CALLBACK_ID,
    CHANNEL_ACTION_ID,
    CHANNEL_BLOCK_ID,
    NEWEST_ACTION_ID,
    NEWEST_BLOCK_ID,
    OLDEST_ACTION_ID,
    OLDEST_BLOCK_ID,
)

LOGGER = logging.getLogger(__name__)


def request_from_view(view: Mapping[str, Any], body: Mapping[str, Any]) -> WordCloudRequest:
    """Build a request from a modal submission."""

    values = view["state"]["values"]
    oldest = values.get(OLDEST_BLOCK_ID, {}).get(OLDEST_ACTION_ID, {}).get("value")
    newest = values.get(NEWEST_BLOCK_ID, {}).get(NEWEST_ACTION_ID, {}).get("value")
    channel = values[CHANNEL_BLOCK_ID][CHANNEL_ACTION_ID]["selected_conversation"]
    return WordCloudRequest(
        channel_id=channel,
        user_id=body["user"]["id"],
        oldest_text=oldest,
        latest_text=newest,
    )


def register(app: AsyncApp, pipeline: WordCloudPipeline, default_days: int = 30) -> None:
    async def word_cloud_submission(ack, view, body, client) -> None:
        await ack()
        request = request_from_view(view, body)
        LOGGER.info("Word cloud modal from %s for %s", request.user_id, request.channel_id)
        await pipeline.run(request, ChannelNotifier(client, default_days))

    app.view(CALLBACK_ID)(word_cloud_submission)
