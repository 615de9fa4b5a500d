"""Word cloud pipeline orchestrator.

The pipeline enforces a strict order for each request:
1) Acknowledge the request to the user
2) Validate the date range into a Query
3) Collect the corpus across every history page
4) Render the corpus into an image
5) Upload the image to the requesting channel

Every stage is awaited before the next begins. Failures are reported to the
user once through the notifier and never retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

from core.config import DateRangeConfig
from core.corpus import HistoryCollector
from core.date_range import build_query
from core.errors import EmptyResultError, ValidationError
from core.models import Artifact, Query, WordCloudRequest
from core.ports import DeliveryPort, Notice, NotifierPort, RendererPort

LOGGER = logging.getLogger(__name__)


class PipelineState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    PAGINATING = "paginating"
    RENDERING = "rendering"
    DELIVERING = "delivering"
    DONE = "done"
    ERROR_NOTIFIED = "error_notified"


@dataclass
class PipelineRun:
    """Per-request record of how far the pipeline got."""

    request: WordCloudRequest
    state: PipelineState = PipelineState.IDLE
    query: Optional[Query] = None
    corpus_chars: int = 0
    error: Optional[BaseException] = None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WordCloudPipeline:
    """Orchestrates validation, collection, rendering, and delivery."""

    def __init__(
        self,
        collector: HistoryCollector,
        renderer: RendererPort,
        delivery: DeliveryPort,
        date_config: DateRangeConfig,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._collector = collector
        self._renderer = renderer
        self._delivery = delivery
        self._date_config = date_config
        self._clock = clock

    def _advance(self, run: PipelineRun, state: PipelineState) -> None:
        LOGGER.debug("Word cloud for %s: %s -> %s", run.request.channel_id, run.state.value, state.value)
        run.state = state

    async def run(self, request: WordCloudRequest, notifier: NotifierPort) -> PipelineRun:
        """Run one request end to end and return its final state."""

        run = PipelineRun(request=request)
        try:
            await notifier.send(Notice.ACKNOWLEDGE, request)

            self._advance(run, PipelineState.VALIDATING)
            run.query = build_query(
                request.channel_id,
                request.oldest_text,
                request.latest_text,
                now=self._clock(),
                default_days=self._date_config.default_days,
            )

            self._advance(run, PipelineState.PAGINATING)
            corpus = await self._collector.collect(run.query)
            run.corpus_chars = len(corpus)
            # Pages with only bot/app messages leave nothing to draw.
            if not corpus.strip():
                raise EmptyResultError(f"No user messages in {request.channel_id}")

            self._advance(run, PipelineState.RENDERING)
            image = await self._renderer.render(corpus)

            self._advance(run, PipelineState.DELIVERING)
            await self._delivery.deliver(Artifact(content=image), request.channel_id)
        except ValidationError as exc:
            LOGGER.info("Invalid date range from %s: %s", request.user_id, exc)
            return await self._fail(run, exc, Notice.INVALID_RANGE, notifier)
        except EmptyResultError as exc:
            LOGGER.info("No messages to draw for %s: %s", request.channel_id, exc)
            return await self._fail(run, exc, Notice.NO_MESSAGES, notifier)
        except Exception as exc:
            LOGGER.exception("Word cloud failed for %s during %s", request.channel_id, run.state.value)
            return await self._fail(run, exc, Notice.FAILURE, notifier)

        self._advance(run, PipelineState.DONE)
        LOGGER.info(
            "Word cloud delivered to %s (%s bytes, corpus_chars=%s)",
            request.channel_id,
            len(image),
            run.corpus_chars,
        )
        return run

    async def _fail(
        self,
        run: PipelineRun,
        error: BaseException,
        notice: Notice,
        notifier: NotifierPort,
    ) -> PipelineRun:
        run.error = error
        self._advance(run, PipelineState.ERROR_NOTIFIED)
        # The notifier may be what failed; the run still ends here.
        try:
            await notifier.send(notice, run.request)
        except Exception:
            LOGGER.exception("Could not notify %s about %s", run.request.user_id, notice.value)
        return run
