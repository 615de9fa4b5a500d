"""Ports (interfaces) used by the core pipeline.

Ports define the minimal contracts for history, rendering, delivery, and
notification adapters so that the core can be reused with different backends.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol

from core.models import Artifact, Page, WordCloudRequest


class Notice(str, Enum):
    """User-facing notifications emitted by the pipeline."""

    ACKNOWLEDGE = "acknowledge"
    INVALID_RANGE = "invalid_range"
    NO_MESSAGES = "no_messages"
    FAILURE = "failure"


class HistoryPort(Protocol):
    """Conversation history reads required by the core pipeline."""

    async def fetch(
        self,
        channel_id: str,
        oldest: int,
        latest: int,
        cursor: Optional[str] = None,
    ) -> Page:
        ...


class RendererPort(Protocol):
    """Turns a text corpus into image bytes."""

    async def render(self, corpus: str) -> bytes:
        ...


class DeliveryPort(Protocol):
    """Uploads a rendered artifact to a channel."""

    async def deliver(self, artifact: Artifact, channel_id: str) -> None:
        ...


class NotifierPort(Protocol):
    """Notification operations required by the core pipeline."""

    async def send(self, notice: Notice, request: WordCloudRequest) -> None:
        ...
