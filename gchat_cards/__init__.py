"""
gchat_cards package

Fluent builder for Google Chat card messages (cardsV2) with a webhook sender.

Key responsibilities are split across modules:
- `card.py`: the `ChatCard` builder
- `icons.py`: image crop styles, built-in icons and icon resolution
- `webhook_client.py`: isolated HTTP POST to a webhook URL
- `card_spec.py`: parse YAML card definitions into builder calls
- `renderer.py`: Jinja2 placeholder rendering for card definitions
- `cli.py`: CLI entrypoint (render / send)
"""

from __future__ import annotations

from gchat_cards.card import ChatCard, InvalidArgumentError, SectionRequiredError
from gchat_cards.icons import BuiltInIcon, IconUrl, ImageType, KnownIcon, resolve_icon
from gchat_cards.webhook_client import WebhookClient, WebhookError

__all__ = [
    "BuiltInIcon",
    "ChatCard",
    "IconUrl",
    "ImageType",
    "InvalidArgumentError",
    "KnownIcon",
    "SectionRequiredError",
    "WebhookClient",
    "WebhookError",
    "__version__",
    "resolve_icon",
]

__version__ = "0.1.0"
