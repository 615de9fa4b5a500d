"""Slack Bolt listeners that collect a request and hand it to the pipeline."""

from __future__ import annotations

from slack_bolt.async_app import AsyncApp

from core.pipeline import WordCloudPipeline
from listeners import commands, shortcuts, views


def register_listeners(app: AsyncApp, pipeline: WordCloudPipeline, default_days: int = 30) -> None:
    commands.register(app, pipeline, default_days)
    shortcuts.register(app)
    views.register(app, pipeline, default_days)
