"""Static configuration for wordcloud-bot.

All user-editable settings (rendering, history paging, date defaults,
logging) live in a single JSON file for quick edits without touching Python.
Secrets stay in the environment and are read by client.py.
"""

import json
import os

from core.config import QUICKCHART_WORDCLOUD_URL, DateRangeConfig, HistoryConfig, RenderConfig

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

CONFIG_PATH = os.getenv("WORDCLOUD_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Word cloud rendering options sent with every request.
_render = _CONFIG.get("render", {})
RENDER = RenderConfig(
    endpoint=_render.get("endpoint", QUICKCHART_WORDCLOUD_URL),
    image_format=_render.get("format", "png"),
    width=int(_render.get("width", 500)),
    height=int(_render.get("height", 500)),
    font_family=_render.get("font_family", "sans-serif"),
    font_scale=int(_render.get("font_scale", 15)),
    scale=_render.get("scale", "linear"),
    timeout_seconds=float(_render.get("timeout_seconds", 60)),
)

# History paging.
# - page_size: messages requested per conversations.history call
# - max_pages: hard stop for a cursor chain that never ends
_history = _CONFIG.get("history", {})
HISTORY = HistoryConfig(
    page_size=int(_history.get("page_size", 100)),
    max_pages=int(_history.get("max_pages", 500)),
)

# Range used when a request omits the oldest date.
_date_range = _CONFIG.get("date_range", {})
DATE_RANGE = DateRangeConfig(default_days=int(_date_range.get("default_days", 30)))

# Upload title shown above the image in Slack.
UPLOAD_TITLE = _CONFIG.get("upload", {}).get("title", "Word cloud")

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
