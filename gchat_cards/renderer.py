"""
renderer.py

Responsibility: Render Jinja2 placeholders in a card definition before it is parsed.

Rules:
- Text without Jinja2 markers is returned unchanged.
- Undefined variables are errors (StrictUndefined), never silently blank.

This module intentionally does NOT know about YAML, cards or webhooks.
"""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, StrictUndefined


class RenderError(RuntimeError):
    pass


def _has_markers(text: str) -> bool:
    return ("{{" in text) or ("{%" in text) or ("{#" in text)


def render_card_text(text: str, context: dict[str, Any]) -> str:
    if not _has_markers(text):
        return text

    env = Environment(
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    try:
        return env.from_string(text).render(**context)
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering card definition: {e}") from e
