"""Slack conversation history adapter.

Implements the core HistoryPort with `conversations.history`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import aiohttp
from slack_sdk.errors import SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from adapters.slack_mapper import page_from_response
from core.errors import UpstreamError
from core.models import Page

LOGGER = logging.getLogger(__name__)


class SlackHistoryFetcher:
    """Reads one page of channel history per call."""

    def __init__(self, client: AsyncWebClient, page_size: int = 100) -> None:
        self._client = client
        self._page_size = page_size

    async def fetch(
        self,
        channel_id: str,
        oldest: int,
        latest: int,
        cursor: Optional[str] = None,
    ) -> Page:
        params: dict[str, Any] = {
            "channel": channel_id,
            "oldest": str(oldest),
            "latest": str(latest),
            "inclusive": True,
            "limit": self._page_size,
        }
        if cursor:
            params["cursor"] = cursor

        try:
            response = await self._client.conversations_history(**params)
        except (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise UpstreamError(f"conversations.history failed for {channel_id}: {e}") from e

        page = page_from_response(response)
        LOGGER.debug(
            "History page for %s: messages=%s, more=%s",
            channel_id,
            len(page.messages),
            bool(page.next_cursor),
        )
        return page
