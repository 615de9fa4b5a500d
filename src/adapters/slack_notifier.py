"""Slack notification adapters.

`SayNotifier` replies through Bolt's `say` for slash commands, while
`ChannelNotifier` posts with chat.postMessage for modal submissions that
have no conversation context of their own.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

import aiohttp
from slack_sdk.errors import SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from adapters.notification_formatting import format_notification
from core.errors import NotificationError
from core.models import WordCloudRequest
from core.ports import Notice

_SEND_ERRORS = (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError)


class SayNotifier:
    """Notifier adapter that replies with Bolt's `say` utility."""

    def __init__(self, say: Callable[..., Awaitable], default_days: int = 30) -> None:
        self._say = say
        self._default_days = default_days

    async def send(self, notice: Notice, request: WordCloudRequest) -> None:
        """Reply in the conversation the command came from."""

        try:
            await self._say(format_notification(notice, request, self._default_days))
        except _SEND_ERRORS as e:
            raise NotificationError(f"Could not reply in {request.channel_id}: {e}") from e


class ChannelNotifier:
    """Notifier adapter that posts into the request's channel."""

    def __init__(self, client: AsyncWebClient, default_days: int = 30) -> None:
        self._client = client
        self._default_days = default_days

    async def send(self, notice: Notice, request: WordCloudRequest) -> None:
        """Post the formatted notice to the requested channel."""

        try:
            await self._client.chat_postMessage(
                channel=request.channel_id,
                text=format_notification(notice, request, self._default_days),
            )
        except _SEND_ERRORS as e:
            raise NotificationError(f"Could not post to {request.channel_id}: {e}") from e
