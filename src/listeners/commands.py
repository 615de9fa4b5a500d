"""`/word-cloud [oldest] [latest]` slash command."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from slack_bolt.async_app import AsyncApp

from adapters.slack_notifier import SayNotifier
from core.models import WordCloudRequest
from core.pipeline import WordCloudPipeline

COMMAND = "/word-cloud"

LOGGER = logging.getLogger(__name__)


def request_from_command(command: Mapping[str, Any]) -> WordCloudRequest:
    """Build a request from a slash command payload.

    The command text holds up to two whitespace-separated dates; anything
    after the second is ignored.
    """

    parts = (command.get("text") or "").split()
    return WordCloudRequest(
        channel_id=command["channel_id"],
        user_id=command["user_id"],
        oldest_text=parts[0] if len(parts) > 0 else None,
        latest_text=parts[1] if len(parts) > 1 else None,
    )


def register(app: AsyncApp, pipeline: WordCloudPipeline, default_days: int = 30) -> None:
    async def word_cloud_command(ack, command, say) -> None:
        await ack()
        request = request_from_command(command)
        LOGGER.info("%s from %s in %s", COMMAND, request.user_id, request.channel_id)
        await pipeline.run(request, SayNotifier(say, default_days))

    app.command(COMMAND)(word_cloud_command)
