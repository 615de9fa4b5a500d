"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass

QUICKCHART_WORDCLOUD_URL = "https://quickchart.io/wordcloud"


@dataclass(frozen=True)
class RenderConfig:
    """Rendering service settings consumed by the renderer adapter."""

    endpoint: str = QUICKCHART_WORDCLOUD_URL
    image_format: str = "png"
    width: int = 500
    height: int = 500
    font_family: str = "sans-serif"
    font_scale: int = 15
    scale: str = "linear"
    timeout_seconds: float = 60.0


@dataclass(frozen=True)
class HistoryConfig:
    """Pagination settings for conversation history reads."""

    page_size: int = 100
    max_pages: int = 500


@dataclass(frozen=True)
class DateRangeConfig:
    """Defaults applied when a request omits one or both dates."""

    default_days: int = 30
