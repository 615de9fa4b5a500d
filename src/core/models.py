"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any integration-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Query:
    """A validated history query for one channel and time window."""

    channel_id: str
    oldest: int
    latest: int


@dataclass(frozen=True)
class Message:
    """Minimal message shape used by the corpus builder."""

    id: Optional[str]
    text: str
    is_qualifying: bool


@dataclass(frozen=True)
class Page:
    """One page of conversation history."""

    messages: Tuple[Message, ...]
    next_cursor: Optional[str] = None


@dataclass(frozen=True)
class RenderRequest:
    """Payload submitted to the word cloud rendering service."""

    image_format: str
    width: int
    height: int
    font_family: str
    font_scale: int
    scale: str
    text: str

    def to_payload(self) -> dict:
        """Return the JSON body expected by the rendering service."""

        return {
            "format": self.image_format,
            "width": self.width,
            "height": self.height,
            "fontFamily": self.font_family,
            "fontScale": self.font_scale,
            "scale": self.scale,
            "text": self.text,
        }


@dataclass(frozen=True)
class Artifact:
    """Rendered image bytes plus the name they are uploaded under.

    Slack derives the file type and mimetype from the extension.
    """

    content: bytes
    filename: str = "word-cloud.png"


@dataclass(frozen=True)
class WordCloudRequest:
    """Inbound request shared by every trigger surface."""

    channel_id: str
    user_id: str
    oldest_text: Optional[str] = None
    latest_text: Optional[str] = None
