from __future__ import annotations

from typing import Iterable, Optional

from core.models import Artifact, Message, Page, WordCloudRequest
from core.ports import Notice


def user_message(text: str, msg_id: str = "c-1") -> Message:
    return Message(id=msg_id, text=text, is_qualifying=True)


def bot_message(text: str) -> Message:
    return Message(id=None, text=text, is_qualifying=False)


def page(*messages: Message, next_cursor: Optional[str] = None) -> Page:
    return Page(messages=tuple(messages), next_cursor=next_cursor)


class FakeHistory:
    def __init__(self, pages: Iterable[Page]) -> None:
        self._pages = list(pages)
        self.calls: list[tuple[str, int, int, Optional[str]]] = []

    async def fetch(self, channel_id: str, oldest: int, latest: int, cursor: Optional[str] = None) -> Page:
        self.calls.append((channel_id, oldest, latest, cursor))
        return self._pages[len(self.calls) - 1]


class EndlessHistory:
    def __init__(self) -> None:
        self.calls = 0

    async def fetch(self, channel_id: str, oldest: int, latest: int, cursor: Optional[str] = None) -> Page:
        self.calls += 1
        return page(user_message(f"word{self.calls}"), next_cursor=f"cursor-{self.calls}")


class FailingHistory:
    def __init__(self, error: Exception) -> None:
        self._error = error

    async def fetch(self, channel_id: str, oldest: int, latest: int, cursor: Optional[str] = None) -> Page:
        raise self._error


class FakeRenderer:
    def __init__(self, image: bytes = b"\x89PNG\r\n\x1a\nfake", error: Optional[Exception] = None) -> None:
        self._image = image
        self._error = error
        self.corpora: list[str] = []

    async def render(self, corpus: str) -> bytes:
        self.corpora.append(corpus)
        if self._error:
            raise self._error
        return self._image


class FakeDelivery:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self._error = error
        self.delivered: list[tuple[Artifact, str]] = []

    async def deliver(self, artifact: Artifact, channel_id: str) -> None:
        if self._error:
            raise self._error
        self.delivered.append((artifact, channel_id))


class FakeNotifier:
    def __init__(self) -> None:
        self.sent: list[tuple[Notice, WordCloudRequest]] = []

    @property
    def notices(self) -> list[Notice]:
        return [notice for notice, _ in self.sent]

    async def send(self, notice: Notice, request: WordCloudRequest) -> None:
        self.sent.append((notice, request))


class BrokenNotifier(FakeNotifier):
    def __init__(self, error: Exception) -> None:
        super().__init__()
        self._error = error

    async def send(self, notice: Notice, request: WordCloudRequest) -> None:
        self.sent.append((notice, request))
        raise self._error
