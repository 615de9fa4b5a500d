from __future__ import annotations

import asyncio

import pytest

from core.config import HistoryConfig
from core.corpus import HistoryCollector, append_page
from core.errors import EmptyResultError, PaginationLimitExceeded
from core.models import Query
from fakes import EndlessHistory, FakeHistory, bot_message, page, user_message

QUERY = Query(channel_id="C123", oldest=1672531200, latest=1672617600)


def test_append_page_skips_non_qualifying_messages() -> None:
    result = append_page(
        page(user_message("hello"), bot_message("bot-noise"), user_message("world")),
        "",
    )
    assert result == "hello world"


def test_append_page_leaves_corpus_unchanged_without_qualifying_messages() -> None:
    assert append_page(page(), "") == ""
    assert append_page(page(), "existing text") == "existing text"
    assert append_page(page(bot_message("deploy finished")), "existing text") == "existing text"


def test_append_page_separates_from_existing_corpus() -> None:
    assert append_page(page(user_message("c")), "a b") == "a b c"


def test_collect_single_page() -> None:
    history = FakeHistory([page(user_message("hello"), bot_message("bot-noise"), user_message("world"))])
    collector = HistoryCollector(history, HistoryConfig())

    corpus = asyncio.run(collector.collect(QUERY))

    assert corpus == "hello world"
    assert history.calls == [("C123", QUERY.oldest, QUERY.latest, None)]


def test_collect_follows_cursor_with_single_boundary_space() -> None:
    history = FakeHistory(
        [
            page(user_message("a"), user_message("b"), next_cursor="dXNlcjpVMDYxTkZUVDI="),
            page(user_message("c")),
        ]
    )
    collector = HistoryCollector(history, HistoryConfig())

    corpus = asyncio.run(collector.collect(QUERY))

    assert corpus == "a b c"
    assert history.calls == [
        ("C123", QUERY.oldest, QUERY.latest, None),
        ("C123", QUERY.oldest, QUERY.latest, "dXNlcjpVMDYxTkZUVDI="),
    ]


def test_collect_tolerates_later_pages_without_user_messages() -> None:
    history = FakeHistory(
        [
            page(user_message("a"), next_cursor="p2"),
            page(bot_message("joined"), next_cursor="p3"),
            page(user_message("b")),
        ]
    )
    corpus = asyncio.run(HistoryCollector(history, HistoryConfig()).collect(QUERY))
    assert corpus == "a b"
    assert len(history.calls) == 3


def test_collect_raises_when_first_page_is_empty() -> None:
    history = FakeHistory([page()])
    with pytest.raises(EmptyResultError):
        asyncio.run(HistoryCollector(history, HistoryConfig()).collect(QUERY))
    assert len(history.calls) == 1


def test_collect_stops_at_page_limit() -> None:
    history = EndlessHistory()
    collector = HistoryCollector(history, HistoryConfig(max_pages=3))

    with pytest.raises(PaginationLimitExceeded) as excinfo:
        asyncio.run(collector.collect(QUERY))

    assert excinfo.value.max_pages == 3
    assert history.calls == 3
