"""Application entry point for the wordcloud-bot Slack app."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Optional

from art import tprint
from dotenv import load_dotenv
from slack_bolt.async_app import AsyncApp

import settings
from adapters.quickchart_renderer import QuickChartRenderer
from adapters.slack_history import SlackHistoryFetcher
from adapters.slack_uploader import SlackFileUploader
from client import build_app, build_socket_handler
from core.corpus import HistoryCollector
from core.pipeline import WordCloudPipeline
from listeners import register_listeners
from logging_setup import configure_logging

NAME = "WORDCLOUD"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def build_pipeline(app: AsyncApp) -> WordCloudPipeline:
    """Wire the Slack and QuickChart adapters into one shared pipeline."""

    history = SlackHistoryFetcher(app.client, page_size=settings.HISTORY.page_size)
    return WordCloudPipeline(
        collector=HistoryCollector(history, settings.HISTORY),
        renderer=QuickChartRenderer(settings.RENDER),
        delivery=SlackFileUploader(app.client, title=settings.UPLOAD_TITLE),
        date_config=settings.DATE_RANGE,
    )


async def _serve(app: AsyncApp) -> None:
    handler = build_socket_handler(app)
    await handler.start_async()


def _run() -> None:
    _print_banner()
    load_dotenv()
    configure_logging(settings.LOGGING, settings.PROJECT_ROOT)
    logger = logging.getLogger(__name__)

    logger.info("Starting wordcloud-bot")

    app = build_app()
    pipeline = build_pipeline(app)
    # Every trigger surface shares the same pipeline; only the notifier differs.
    register_listeners(app, pipeline, default_days=settings.DATE_RANGE.default_days)
    logger.info(
        "Listeners registered (render endpoint %s, max %s history pages)",
        settings.RENDER.endpoint,
        settings.HISTORY.max_pages,
    )

    asyncio.run(_serve(app))


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="wordcloud-bot")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Connect over Socket Mode and serve word cloud requests")

    parser.parse_args(argv)
    _run()


if __name__ == "__main__":
    main()
