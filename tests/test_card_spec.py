from pathlib import Path

import pytest

from gchat_cards import ChatCard, InvalidArgumentError, SectionRequiredError
from gchat_cards.card_spec import CardSpecError, build_card, parse_card_spec, parse_card_spec_text
from gchat_cards.icons import ImageType

FULL = """
text: "<users/42> deploy done"
header:
  title: Release 1.4
  subtitle: production
  image_type: circle
  image_url: https://example.com/logo.png
sections:
  - title: Details
    collapsible: true
    uncollapsible_widgets_count: 1
    widgets:
      - decorated_text: {text: "All checks passed", top_label: Status, icon: STAR}
      - divider
      - text_paragraph: {text: "<b>notes</b>"}
      - image: {image_url: "https://example.com/graph.png", alt_text: graph}
      - button: {text: Open, link_url: "https://example.com/run/1"}
      - button: {text: Logs, link_url: "https://example.com/run/1/logs", icon: DESCRIPTION}
"""


def test_full_definition_builds_expected_card() -> None:
    card = build_card(parse_card_spec_text(FULL))
    expected = (
        ChatCard()
        .text("<users/42> deploy done")
        .header("Release 1.4", "production", ImageType.CIRCLE, "https://example.com/logo.png")
        .section("Details", True, 1)
        .decorated_text("All checks passed", top_label="Status", icon="STAR")
        .divider()
        .text_paragraph("<b>notes</b>")
        .image("https://example.com/graph.png", "graph")
        .button("Open", "https://example.com/run/1")
        .button("Logs", "https://example.com/run/1/logs", icon="DESCRIPTION")
    )
    assert card.to_json() == expected.to_json()
    widgets = card.to_json()["cardsV2"][0]["card"]["sections"][0]["widgets"]
    assert len(widgets[-1]["buttonList"]["buttons"]) == 2


def test_parsed_model_fields() -> None:
    spec = parse_card_spec_text(FULL)
    assert spec.header is not None
    assert spec.header["image_type"] is ImageType.CIRCLE
    assert spec.sections[0].title == "Details"
    assert [w.kind for w in spec.sections[0].widgets] == [
        "decorated_text",
        "divider",
        "text_paragraph",
        "image",
        "button",
        "button",
    ]


def test_markdown_frontmatter_body_becomes_text(tmp_path: Path) -> None:
    path = tmp_path / "card.md"
    path.write_text("---\nheader:\n  title: Hi\n---\n\nHello **team**\n", encoding="utf-8")
    spec = parse_card_spec(path)
    assert spec.text == "Hello **team**"
    assert build_card(spec).to_json()["text"] == "Hello **team**"


def test_frontmatter_text_wins_over_body() -> None:
    spec = parse_card_spec_text("---\ntext: from yaml\n---\nbody\n")
    assert spec.text == "from yaml"


def test_empty_definition_is_blank_card() -> None:
    assert build_card(parse_card_spec_text("")).to_json() == ChatCard().to_json()


def test_build_card_into_existing_card() -> None:
    card = ChatCard().section("first")
    assert build_card(parse_card_spec_text("sections:\n  - title: second\n"), card) is card
    assert len(card.to_json()["cardsV2"][0]["card"]["sections"]) == 2


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CardSpecError):
        parse_card_spec(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "header: [1, 2]\n",
        "sections: {a: 1}\n",
        "sections:\n  - widgets: {divider: {}}\n",
        "sections:\n  - widgets:\n      - carousel: {}\n",
        "sections:\n  - widgets:\n      - {divider: {}, button: {}}\n",
        "sections:\n  - widgets:\n      - button: {text: a, link_url: b, colour: red}\n",
        "header: {title: t, image_type: hexagon}\n",
        "colour: red\n",
        "---\ntext: unterminated\n",
        "text: [unclosed\n",
    ],
)
def test_malformed_definitions(text: str) -> None:
    with pytest.raises(CardSpecError):
        parse_card_spec_text(text)


def test_missing_header_title_fails_in_builder() -> None:
    spec = parse_card_spec_text("header: {subtitle: only}\n")
    with pytest.raises(InvalidArgumentError):
        build_card(spec)


def test_missing_button_link_fails_in_builder() -> None:
    spec = parse_card_spec_text("sections:\n  - widgets:\n      - button: {text: a}\n")
    with pytest.raises(InvalidArgumentError):
        build_card(spec)


def test_empty_sections_leave_card_blank() -> None:
    card = build_card(parse_card_spec_text("sections: []\n"))
    assert card.to_json() == ChatCard().to_json()
    with pytest.raises(SectionRequiredError):
        card.divider()
