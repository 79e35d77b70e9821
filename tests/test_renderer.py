"""Tests for proxy markup rendering."""

from proxygen.models.decklist import ProxyEntry
from proxygen.models.entity import (
    Creature,
    Plain,
    Planeswalker,
    TwoPart,
    TwoPartKind,
    Unimplemented,
)
from proxygen.services.card_database import ReferenceStore
from proxygen.services.decklist import parse_decklist
from proxygen.services.renderer import (
    format_card_text,
    format_typeline,
    render_document,
    render_entity,
)

BEARS = Creature(
    name="Grizzly Bears",
    manacost="{1}{G}",
    typeline="Creature — Bear",
    text="",
    power="2",
    toughness="2",
)


class TestFormatters:
    def test_card_text_line_breaks(self) -> None:
        assert format_card_text("Flash\nFlying") == "Flash<br>Flying"

    def test_card_text_italicizes_reminder_text(self) -> None:
        result = format_card_text("Flying (This creature can't be blocked.)")

        assert result == "Flying <i>(This creature can&#39;t be blocked.)</i>"

    def test_card_text_escapes_html(self) -> None:
        assert "&lt;script&gt;" in format_card_text("<script>")

    def test_typeline_em_dash(self) -> None:
        assert format_typeline("Creature — Bear") == "Creature &mdash; Bear"


class TestRenderEntity:
    def test_creature(self) -> None:
        html = render_entity(BEARS)

        assert "<b>Grizzly Bears</b> {1}{G}" in html
        assert "Creature &mdash; Bear" in html
        assert "2/2" in html
        assert 'class="card creature"' in html

    def test_planeswalker_shows_loyalty(self) -> None:
        walker = Planeswalker(
            name="Jace Beleren", manacost="{1}{U}{U}", typeline="", text="", loyalty=3
        )

        assert "Loyalty: 3" in render_entity(walker)

    def test_plain_has_no_stats(self) -> None:
        html = render_entity(Plain(name="Island", manacost="", typeline="Land", text=""))

        assert 'class="stats"' not in html

    def test_two_part_renders_both_faces(self) -> None:
        entity = TwoPart(
            kind=TwoPartKind.SPLIT,
            first=Plain(name="Fire", manacost="{1}{R}", typeline="Instant", text=""),
            second=Plain(name="Ice", manacost="{1}{U}", typeline="Instant", text=""),
        )

        html = render_entity(entity)

        assert 'class="card two-part split"' in html
        assert "<b>Fire</b>" in html
        assert "<b>Ice</b>" in html

    def test_unimplemented_renders_placeholder(self) -> None:
        html = render_entity(Unimplemented(name="Stairs to Infinity", layout="plane"))

        assert "Stairs to Infinity" in html
        assert "not yet supported" in html
        assert "plane" in html

    def test_names_are_escaped(self) -> None:
        html = render_entity(Plain(name="<b>Evil</b>", manacost="", typeline="", text=""))

        assert "&lt;b&gt;Evil&lt;/b&gt;" in html


class TestRenderDocument:
    def test_one_card_per_copy(self) -> None:
        html = render_document([ProxyEntry(count=3, entity=BEARS)])

        assert html.count("<b>Grizzly Bears</b>") == 3
        assert html.startswith("<!DOCTYPE html>")

    def test_renders_resolved_decklist(self, store: ReferenceStore, sample_decklist: str) -> None:
        entries = parse_decklist(store, sample_decklist, max_total_count=60)

        html = render_document(entries, title="Sample")

        assert "<title>Sample</title>" in html
        assert html.count('class="card ') == 9
        assert "<b>Insectile Aberration</b>" in html
