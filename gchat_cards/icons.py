"""
icons.py

Responsibility: Enumerations exposed to card authors and icon resolution.

An icon reference given to the builder is either one of the platform's built-in
icons or a literal image URL. `resolve_icon` makes that decision once and returns
one of two explicit variants, each of which knows its own JSON shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ImageType(str, Enum):
    """Crop style applied to an image."""

    SQUARE = "SQUARE"
    CIRCLE = "CIRCLE"


class BuiltInIcon(str, Enum):
    """Icons usable without supplying a custom image URL."""

    AIRPLANE = "AIRPLANE"
    BOOKMARK = "BOOKMARK"
    BUS = "BUS"
    CAR = "CAR"
    CLOCK = "CLOCK"
    CONFIRMATION_NUMBER = "CONFIRMATION_NUMBER_ICON"
    DESCRIPTION = "DESCRIPTION"
    DOLLAR = "DOLLAR"
    EMAIL = "EMAIL"
    EVENT_SEAT = "EVENT_SEAT"
    FLIGHT_ARRIVAL = "FLIGHT_ARRIVAL"
    FLIGHT_DEPARTURE = "FLIGHT_DEPARTURE"
    HOTEL = "HOTEL"
    HOTEL_ROOM_TYPE = "HOTEL_ROOM_TYPE"
    INVITE = "INVITE"
    MAP_PIN = "MAP_PIN"
    MEMBERSHIP = "MEMBERSHIP"
    MULTIPLE_PEOPLE = "MULTIPLE_PEOPLE"
    PERSON = "PERSON"
    PHONE = "PHONE"
    RESTAURANT = "RESTAURANT_ICON"
    SHOPPING_CART = "SHOPPING_CART"
    STAR = "STAR"
    STORE = "STORE"
    TICKET = "TICKET"
    TRAIN = "TRAIN"
    VIDEO_CAMERA = "VIDEO_CAMERA"
    VIDEO_PLAY = "VIDEO_PLAY"


_BUILT_IN_BY_VALUE: dict[str, BuiltInIcon] = {icon.value: icon for icon in BuiltInIcon}


def enum_value(value: Any) -> Any:
    """Unwrap enum members to their plain value; pass anything else through."""
    if isinstance(value, Enum):
        return value.value
    return value


def _icon_dict(key: str, ref: str, image_type: Any, alt_text: str | None) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if image_type is not None:
        out["imageType"] = enum_value(image_type)
    out[key] = ref
    if alt_text is not None:
        out["altText"] = alt_text
    return out


@dataclass(frozen=True)
class KnownIcon:
    icon: BuiltInIcon

    def to_dict(self, *, image_type: Any = None, alt_text: str | None = None) -> dict[str, Any]:
        return _icon_dict("knownIcon", self.icon.value, image_type, alt_text)


@dataclass(frozen=True)
class IconUrl:
    url: str

    def to_dict(self, *, image_type: Any = None, alt_text: str | None = None) -> dict[str, Any]:
        return _icon_dict("iconUrl", self.url, image_type, alt_text)


Icon = KnownIcon | IconUrl


def resolve_icon(value: str | BuiltInIcon | Icon) -> Icon:
    """
    Resolve an icon reference.

    Exact matches against a built-in icon value (e.g. "STAR") become a
    `KnownIcon`; every other string is taken as a literal URL.
    """
    if isinstance(value, (KnownIcon, IconUrl)):
        return value
    if isinstance(value, BuiltInIcon):
        return KnownIcon(value)
    known = _BUILT_IN_BY_VALUE.get(value)
    if known is not None:
        return KnownIcon(known)
    return IconUrl(str(value))
