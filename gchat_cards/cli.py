"""
cli.py

Responsibility: CLI entrypoint for gchat-cards.

Flow for both commands:
1) Read the card definition file
2) Render Jinja2 placeholders with `--var` values
3) Parse the definition -> `CardSpec` -> `ChatCard`
4) `render`: print the JSON; `send`: POST it to the webhook

Concerns stay in their modules:
- Templating: `renderer.py`
- Definition parsing: `card_spec.py`
- Card assembly: `card.py`
- HTTP: `webhook_client.py`
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from gchat_cards.card import ChatCard, InvalidArgumentError, SectionRequiredError
from gchat_cards.card_spec import CardSpecError, build_card, parse_card_spec_text
from gchat_cards.renderer import RenderError, render_card_text
from gchat_cards.webhook_client import WebhookClient, WebhookError

logger = logging.getLogger(__name__)

WEBHOOK_URL_ENV = "GOOGLE_CHAT_WEBHOOK_URL"


class CLIError(RuntimeError):
    pass


def _parse_vars(pairs: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise CLIError(f"Invalid --var {pair!r} (expected KEY=VALUE)")
        out[key] = value
    return out


def _load_card(args: argparse.Namespace) -> ChatCard:
    path = Path(args.definition)
    if not path.exists():
        raise CLIError(f"Card definition does not exist: {path}")
    text = render_card_text(path.read_text(encoding="utf-8"), _parse_vars(args.var))
    return build_card(parse_card_spec_text(text))


def render_cmd(args: argparse.Namespace) -> int:
    card = _load_card(args)
    sys.stdout.write(card.to_json_string(indent=args.indent) + "\n")
    return 0


def send_cmd(args: argparse.Namespace) -> int:
    url = args.webhook_url or os.environ.get(WEBHOOK_URL_ENV) or ""
    if not url:
        raise CLIError(f"Webhook URL is required (use --webhook-url or set {WEBHOOK_URL_ENV})")
    card = _load_card(args)
    card.send(url, client=WebhookClient(timeout=args.timeout))
    logger.info("Card sent")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gchat-cards", description="Build Google Chat cards and send them to webhooks")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("definition", help="Path to the card definition (YAML or Markdown with YAML frontmatter)")
        sp.add_argument(
            "--var",
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Template variable for {{ KEY }} placeholders (repeatable)",
        )

    r = sub.add_parser("render", help="Print the card JSON")
    add_common(r)
    r.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    r.set_defaults(func=render_cmd)

    s = sub.add_parser("send", help="POST the card to a Google Chat webhook")
    add_common(s)
    s.add_argument("--webhook-url", default=None, help=f"Webhook URL (or set env {WEBHOOK_URL_ENV})")
    s.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (default: none)")
    s.set_defaults(func=send_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except (
        CLIError,
        CardSpecError,
        RenderError,
        WebhookError,
        InvalidArgumentError,
        SectionRequiredError,
    ) as e:
        sys.stderr.write(f"error: {e}\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
