"""Corpus assembly from paginated conversation history (core domain)."""

from __future__ import annotations

import logging

from core.config import HistoryConfig
from core.errors import EmptyResultError, PaginationLimitExceeded
from core.models import Page, Query
from core.ports import HistoryPort

LOGGER = logging.getLogger(__name__)

SEPARATOR = " "


def append_page(page: Page, corpus: str) -> str:
    """Append the qualifying message texts of one page to the corpus.

    Messages without a client identifier (bot, app, and system messages) are
    skipped. A single space separates consecutive texts, including the last
    text of a previous page and the first text of this one, but the corpus
    never starts with a separator.
    """

    for message in page.messages:
        if not message.is_qualifying:
            continue
        if corpus:
            corpus = f"{corpus}{SEPARATOR}{message.text}"
        else:
            corpus = message.text
    return corpus


class HistoryCollector:
    """Walks every history page of a query and builds the corpus."""

    def __init__(self, history: HistoryPort, config: HistoryConfig) -> None:
        self._history = history
        self._config = config

    async def collect(self, query: Query) -> str:
        """Return the full corpus for the query.

        Raises EmptyResultError when the first page holds no messages at all,
        and PaginationLimitExceeded when the cursor chain outlives max_pages.
        """

        page = await self._history.fetch(query.channel_id, query.oldest, query.latest)
        if not page.messages:
            raise EmptyResultError(f"No messages in {query.channel_id} between {query.oldest} and {query.latest}")

        corpus = append_page(page, "")
        pages = 1
        messages = len(page.messages)

        while page.next_cursor:
            if pages >= self._config.max_pages:
                raise PaginationLimitExceeded(self._config.max_pages)
            page = await self._history.fetch(
                query.channel_id,
                query.oldest,
                query.latest,
                cursor=page.next_cursor,
            )
            corpus = append_page(page, corpus)
            pages += 1
            messages += len(page.messages)

        LOGGER.info(
            "Collected history for %s: pages=%s, messages=%s, corpus_chars=%s",
            query.channel_id,
            pages,
            messages,
            len(corpus),
        )
        return corpus
