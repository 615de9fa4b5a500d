"""Error kinds raised inside the word cloud pipeline.

Adapters translate library exceptions into these so the orchestrator can
decide what the user sees without knowing about Slack or HTTP.
"""

from __future__ import annotations


class WordCloudError(Exception):
    """Base class for all pipeline failures."""


class ValidationError(WordCloudError):
    """The requested date range is unparseable or not ordered."""


class EmptyResultError(WordCloudError):
    """No messages were found in the requested range."""


class UpstreamError(WordCloudError):
    """The chat platform's history endpoint failed."""


class RenderError(WordCloudError):
    """The rendering service was unreachable or returned an error."""


class DeliveryError(WordCloudError):
    """Uploading the rendered image failed."""


class PaginationLimitExceeded(WordCloudError):
    """History pagination did not finish within the configured page limit."""

    def __init__(self, max_pages: int) -> None:
        super().__init__(f"History pagination exceeded {max_pages} pages")
        self.max_pages = max_pages


class NotificationError(WordCloudError):
    """A progress or failure message could not be posted to the user."""
