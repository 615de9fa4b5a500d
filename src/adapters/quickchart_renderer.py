"""QuickChart word cloud rendering adapter.

Implements the core RendererPort by POSTing the corpus to the QuickChart
word cloud API and returning the raw image bytes.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

import aiohttp

from core.config import RenderConfig
from core.errors import RenderError
from core.models import RenderRequest

LOGGER = logging.getLogger(__name__)


class QuickChartRenderer:
    """Renderer adapter backed by https://quickchart.io/wordcloud."""

    def __init__(
        self,
        config: RenderConfig,
        session_factory: Callable[..., aiohttp.ClientSession] = aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._session_factory = session_factory

    def build_request(self, corpus: str) -> RenderRequest:
        return RenderRequest(
            image_format=self._config.image_format,
            width=self._config.width,
            height=self._config.height,
            font_family=self._config.font_family,
            font_scale=self._config.font_scale,
            scale=self._config.scale,
            text=corpus,
        )

    async def render(self, corpus: str) -> bytes:
        """Render the corpus and return the image bytes unmodified."""

        payload = self.build_request(corpus).to_payload()
        timeout = aiohttp.ClientTimeout(total=self._config.timeout_seconds)
        try:
            async with self._session_factory(timeout=timeout) as session:
                async with session.post(self._config.endpoint, json=payload) as response:
                    body = await response.read()
                    if response.status >= 400:
                        detail = body[:200].decode("utf-8", errors="replace")
                        raise RenderError(f"Word cloud API error {response.status}: {detail}")
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise RenderError(f"Word cloud API unreachable: {e}") from e

        LOGGER.info("Rendered word cloud (%s bytes)", len(body))
        return body
