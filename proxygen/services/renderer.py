"""
Proxy markup renderer.

Turns resolved entities into HTML using the Jinja2 templates shipped in
proxygen/templates. The resolver never depends on this module; it only
consumes Entity values.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup, escape

from proxygen.models.decklist import ProxyEntry
from proxygen.models.entity import Entity

# Reminder text: "(This creature can't block.)"
_REMINDER_PATTERN = re.compile(r"\([^()\n]*\)")


def format_card_text(text: str) -> Markup:
    """Escape rules text, italicize reminder text and keep line breaks."""
    escaped = str(escape(text))
    italicized = _REMINDER_PATTERN.sub(lambda m: f"<i>{m.group(0)}</i>", escaped)
    return Markup(italicized.replace("\n", "<br>"))


def format_typeline(typeline: str) -> Markup:
    return Markup(str(escape(typeline)).replace("—", "&mdash;"))


def _variant_of(entity: object) -> str:
    return type(entity).__name__


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Build the Jinja2 environment once per process."""
    env = Environment(
        loader=PackageLoader("proxygen", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["card_text"] = format_card_text
    env.filters["typeline"] = format_typeline
    env.globals["variant_of"] = _variant_of
    return env


def render_entity(entity: Entity) -> str:
    """
    Render one proxy card.

    Unimplemented entities render a "not yet supported" placeholder instead
    of failing, so one exotic card never blocks a whole sheet.
    """
    macros = get_environment().get_template("card.html").module
    return str(macros.card(entity))  # type: ignore[attr-defined]


def render_document(entries: Iterable[ProxyEntry], title: str = "Proxies") -> str:
    """Render a printable HTML sheet with one card per requested copy."""
    template = get_environment().get_template("proxies.html")
    return template.render(entries=list(entries), title=title)
