"""Slack file upload adapter.

Implements the core DeliveryPort by uploading the rendered bytes straight
from memory, so concurrent requests never share a file on disk.
"""

from __future__ import annotations

import asyncio

import aiohttp
from slack_sdk.errors import SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from core.errors import DeliveryError
from core.models import Artifact


class SlackFileUploader:
    """Uploads artifacts to a channel with files_upload_v2."""

    def __init__(self, client: AsyncWebClient, title: str = "Word cloud") -> None:
        self._client = client
        self._title = title

    async def deliver(self, artifact: Artifact, channel_id: str) -> None:
        try:
            await self._client.files_upload_v2(
                channel=channel_id,
                file=artifact.content,
                filename=artifact.filename,
                title=self._title,
            )
        except (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DeliveryError(f"Upload of {artifact.filename} to {channel_id} failed: {e}") from e
