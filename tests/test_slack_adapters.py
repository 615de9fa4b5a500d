from __future__ import annotations

import asyncio

import pytest
from slack_sdk.errors import SlackApiError

from adapters.slack_history import SlackHistoryFetcher
from adapters.slack_mapper import message_from_payload, page_from_response
from adapters.slack_uploader import SlackFileUploader
from core.errors import DeliveryError, UpstreamError
from core.models import Artifact


class FakeWebClient:
    def __init__(self, responses=None, error: "Exception | None" = None) -> None:
        self._responses = list(responses or [])
        self._error = error
        self.history_calls: list[dict] = []
        self.uploads: list[dict] = []

    async def conversations_history(self, **kwargs):
        self.history_calls.append(kwargs)
        if self._error:
            raise self._error
        return self._responses.pop(0)

    async def files_upload_v2(self, **kwargs):
        if self._error:
            raise self._error
        self.uploads.append(kwargs)
        return {"ok": True}


def _slack_error(code: str) -> SlackApiError:
    return SlackApiError(f"The request to the Slack API failed. ({code})", {"ok": False, "error": code})


def test_message_with_client_msg_id_qualifies() -> None:
    message = message_from_payload(
        {"type": "message", "user": "U1", "text": "hello", "client_msg_id": "7d2c1f1e", "ts": "1.0"}
    )
    assert message.is_qualifying
    assert message.id == "7d2c1f1e"
    assert message.text == "hello"


def test_bot_and_system_messages_do_not_qualify() -> None:
    bot = message_from_payload({"type": "message", "subtype": "bot_message", "bot_id": "B1", "text": "beep"})
    join = message_from_payload({"type": "message", "subtype": "channel_join", "text": "<@U1> has joined"})
    assert not bot.is_qualifying
    assert not join.is_qualifying
    assert bot.id is None


def test_page_from_response_treats_empty_cursor_as_absent() -> None:
    response = {
        "ok": True,
        "messages": [{"text": "a", "client_msg_id": "1"}, {"client_msg_id": "2"}],
        "has_more": False,
        "response_metadata": {"next_cursor": ""},
    }
    page = page_from_response(response)
    assert page.next_cursor is None
    assert [message.text for message in page.messages] == ["a", ""]


def test_page_from_response_without_metadata() -> None:
    page = page_from_response({"ok": True, "messages": []})
    assert page.messages == ()
    assert page.next_cursor is None


def test_history_fetcher_sends_bounds_and_cursor() -> None:
    client = FakeWebClient(
        responses=[
            {"messages": [{"text": "a", "client_msg_id": "1"}], "response_metadata": {"next_cursor": "abc"}},
            {"messages": [], "response_metadata": {"next_cursor": ""}},
        ]
    )
    fetcher = SlackHistoryFetcher(client)

    first = asyncio.run(fetcher.fetch("C1", 100, 200))
    second = asyncio.run(fetcher.fetch("C1", 100, 200, cursor=first.next_cursor))

    assert first.next_cursor == "abc"
    assert second.next_cursor is None
    assert client.history_calls[0] == {
        "channel": "C1",
        "oldest": "100",
        "latest": "200",
        "inclusive": True,
        "limit": 100,
    }
    assert client.history_calls[1]["cursor"] == "abc"


def test_history_fetcher_wraps_slack_errors() -> None:
    fetcher = SlackHistoryFetcher(FakeWebClient(error=_slack_error("not_in_channel")))
    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(fetcher.fetch("C1", 100, 200))
    assert isinstance(excinfo.value.__cause__, SlackApiError)


def test_uploader_sends_bytes_from_memory() -> None:
    client = FakeWebClient()
    content = b"\x89PNG\r\n\x1a\nimage-bytes"

    asyncio.run(SlackFileUploader(client).deliver(Artifact(content=content), "C9"))

    upload = client.uploads[0]
    assert set(upload) == {"channel", "file", "filename", "title"}
    assert upload["channel"] == "C9"
    assert upload["file"] is content
    assert upload["filename"] == "word-cloud.png"


def test_uploader_wraps_slack_errors() -> None:
    uploader = SlackFileUploader(FakeWebClient(error=_slack_error("channel_not_found")))
    with pytest.raises(DeliveryError):
        asyncio.run(uploader.deliver(Artifact(content=b"png"), "C9"))
