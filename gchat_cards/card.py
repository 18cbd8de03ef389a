"""
card.py

Responsibility: Fluent builder for a single Google Chat card message (cardsV2).

The builder owns one document and appends headers, sections and widgets to it in
response to chained calls. Widgets are always added to the most recently created
section. Optional values left as `None` are not written to the document, so
`to_json()` is exactly what the webhook receives.

Sending is delegated to `webhook_client.py`.
"""

from __future__ import annotations

import json
from typing import Any

from gchat_cards.icons import BuiltInIcon, Icon, ImageType, enum_value, resolve_icon
from gchat_cards.webhook_client import WebhookClient


class InvalidArgumentError(ValueError):
    pass


class SectionRequiredError(RuntimeError):
    pass


def _require_str(name: str, value: Any) -> None:
    if not value or not isinstance(value, str):
        raise InvalidArgumentError(f'A valid "{name}" string argument is required.')


def _compact(**fields: Any) -> dict[str, Any]:
    """
    Drop `None` values and unwrap enums, keeping key order.
    """
    return {k: enum_value(v) for k, v in fields.items() if v is not None}


def _open_link(url: str) -> dict[str, Any]:
    return {"openLink": {"url": url}}


class ChatCard:
    """
    A Google Chat card message under construction.

    See https://developers.google.com/chat/api/reference/rest/v1/cards
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._section: dict[str, Any] | None = None
        self.reset()

    @property
    def _card(self) -> dict[str, Any]:
        return self._data["cardsV2"][0]["card"]

    def _current_section(self) -> dict[str, Any]:
        if self._section is None:
            raise SectionRequiredError("A section is required.")
        return self._section

    def header(
        self,
        title: str,
        subtitle: str | None = None,
        image_type: ImageType | str | None = None,
        image_url: str | None = None,
        image_alt_text: str | None = None,
    ) -> ChatCard:
        """
        Set the card header, replacing any previous one.

        If both a title and subtitle are given each takes one line; a title alone
        takes both lines of the fixed-height header.
        """
        _require_str("title", title)
        self._card["header"] = _compact(
            title=title,
            subtitle=subtitle,
            imageType=image_type,
            imageUrl=image_url,
            imageAltText=image_alt_text,
        )
        return self

    def section(
        self,
        title: str | None = None,
        collapsible: bool | None = None,
        uncollapsible_widgets_count: int | None = None,
    ) -> ChatCard:
        """
        Start a new section; following widget calls add to it.
        """
        section: dict[str, Any] = _compact(header=title)
        section["widgets"] = []
        section.update(
            _compact(collapsible=collapsible, uncollapsibleWidgetsCount=uncollapsible_widgets_count)
        )
        self._card["sections"].append(section)
        self._section = section
        return self

    def divider(self) -> ChatCard:
        self._current_section()["widgets"].append({"divider": {}})
        return self

    def image(self, image_url: str, alt_text: str | None = None, link_url: str | None = None) -> ChatCard:
        section = self._current_section()
        _require_str("image_url", image_url)
        img = _compact(imageUrl=image_url, altText=alt_text)
        if link_url:
            img["onClick"] = _open_link(link_url)
        section["widgets"].append({"image": img})
        return self

    def text_paragraph(self, text: str) -> ChatCard:
        section = self._current_section()
        _require_str("text", text)
        section["widgets"].append({"textParagraph": {"text": text}})
        return self

    def decorated_text(
        self,
        text: str,
        wrap_text: bool | None = None,
        top_label: str | None = None,
        bottom_label: str | None = None,
        image_type: ImageType | str | None = None,
        icon: str | BuiltInIcon | Icon | None = None,
        icon_alt: str | None = None,
    ) -> ChatCard:
        """
        Add text with optional labels and a leading icon.

        `icon` may be a `BuiltInIcon`, the value of one (e.g. "STAR"), or an image URL.
        """
        section = self._current_section()
        _require_str("text", text)
        dt = _compact(text=text, wrapText=wrap_text, topLabel=top_label, bottomLabel=bottom_label)
        if icon:
            dt["startIcon"] = resolve_icon(icon).to_dict(image_type=image_type, alt_text=icon_alt)
        section["widgets"].append({"decoratedText": dt})
        return self

    def button(
        self,
        text: str,
        link_url: str,
        image_type: ImageType | str | None = None,
        icon: str | BuiltInIcon | Icon | None = None,
        icon_alt: str | None = None,
    ) -> ChatCard:
        """
        Add a link button.

        Consecutive buttons share one button list; any other widget in between
        starts a new list.
        """
        section = self._current_section()
        _require_str("text", text)
        _require_str("link_url", link_url)

        widgets = section["widgets"]
        if widgets and isinstance(widgets[-1].get("buttonList"), dict):
            button_list = widgets[-1]["buttonList"]
        else:
            button_list = {"buttons": []}
            widgets.append({"buttonList": button_list})

        btn: dict[str, Any] = {"text": text, "onClick": _open_link(link_url)}
        if icon:
            btn["icon"] = resolve_icon(icon).to_dict(image_type=image_type, alt_text=icon_alt)
        button_list["buttons"].append(btn)
        return self

    def text(self, message: str | None) -> ChatCard:
        """
        Set the plain message shown above the card, overwriting any previous one.

        Mentions use the `<users/USER_ID>` form.
        """
        if message is None:
            self._data.pop("text", None)
        else:
            self._data["text"] = message
        return self

    def reset(self) -> ChatCard:
        """Discard everything and start over with a blank card."""
        self._data = {"cardsV2": [{"card": {"sections": []}}]}
        self._section = None
        return self

    def to_json(self) -> dict[str, Any]:
        """
        Return the live message document (not a copy).
        """
        return self._data

    def to_json_string(self, **dumps_kwargs: Any) -> str:
        return json.dumps(self._data, **dumps_kwargs)

    def send(self, url: str, client: WebhookClient | None = None) -> None:
        """
        POST the card to a Google Chat webhook URL.

        Raises `WebhookError` if the webhook does not answer with a 2xx status.
        """
        (client or WebhookClient()).post_message(url, self._data)
