"""Shared notification formatting helpers.

Keeping formatting here prevents drift between adapters and keeps messages
consistent regardless of which trigger started the request.
"""

from __future__ import annotations

from core.date_range import describe_range
from core.models import WordCloudRequest
from core.ports import Notice

USAGE = "/word-cloud [YYYY-MM-DD of oldest date] [YYYY-MM-DD of latest date]"


def mention(user_id: str) -> str:
    """Return Slack mention markup for a user id."""

    return f"<@{user_id}>"


def format_notification(notice: Notice, request: WordCloudRequest, default_days: int = 30) -> str:
    """Return the user-facing text for a pipeline notice."""

    user = mention(request.user_id)
    if notice is Notice.ACKNOWLEDGE:
        oldest_label, latest_label = describe_range(request.oldest_text, request.latest_text, default_days)
        return (
            f"Hi, {user}! We are generating a word cloud for you from "
            f"{oldest_label} to {latest_label}. Hang tight!"
        )
    if notice is Notice.INVALID_RANGE:
        return (
            f"Sorry, {user}! That is an invalid date range. Please use {USAGE} "
            "to specify your range and try again!"
        )
    if notice is Notice.NO_MESSAGES:
        return (
            f"Sorry, {user}! We couldn't find any messages in that date range "
            "to create a word cloud. Please try again!"
        )
    if notice is Notice.FAILURE:
        return f"Sorry, {user}! There was an error. Please try again!"
    raise ValueError(f"Unsupported notice: {notice}")
