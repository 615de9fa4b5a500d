"""Slack-to-core message mapping adapter.

This keeps Slack payload details out of the core pipeline.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from core.models import Message, Page


def message_from_payload(payload: Mapping[str, Any]) -> Message:
    """Build a core Message from one conversations.history entry.

    Only messages typed by a person in a Slack client carry `client_msg_id`;
    bot, app, and system messages do not, so its presence marks the message
    as qualifying.
    """

    client_msg_id = payload.get("client_msg_id") or None
    return Message(
        id=client_msg_id,
        text=payload.get("text") or "",
        is_qualifying=client_msg_id is not None,
    )


def _next_cursor(response: Mapping[str, Any]) -> Optional[str]:
    metadata = response.get("response_metadata") or {}
    # Slack returns an empty string on the last page.
    return metadata.get("next_cursor") or None


def page_from_response(response: Mapping[str, Any]) -> Page:
    """Build a core Page from a conversations.history response."""

    raw_messages = response.get("messages") or []
    return Page(
        messages=tuple(message_from_payload(item) for item in raw_messages),
        next_cursor=_next_cursor(response),
    )
