"""
Parser for free-text decklists.

Accepted line formats:
    Snapcaster Mage                 count defaults to 1
    4 Lightning Bolt
    4x Lightning Bolt / 4 x Lightning Bolt / 4X Lightning Bolt
    2 Fire // Ice                   only "Fire" is looked up
    4 Lightning Bolt (LEB) 163      Arena printing suffix is dropped

Blank lines, comments ("// ..." or "# ...") and Arena section headers
(Deck, Sideboard, Commander, Companion) are skipped.

This module handles SYNTAX only. It does not resolve names or enforce the
total-count ceiling; see proxygen.services.decklist for that.
"""

import re
from collections.abc import Iterator

from proxygen.models.decklist import DecklistLine
from proxygen.models.failure import DecklistParseError

# Optional count, optional "x", then the name. The count must be followed by
# whitespace or an "x" and whitespace, so "4x" alone or "Xenagos" never
# lose characters to the count token.
_LINE_PATTERN = re.compile(r"^(?:(?P<count>\d+)\s*(?:[xX]\s+|\s))?\s*(?P<name>.*)$")

# A line that is nothing but a count token: "4", "4x", "4 x"
_COUNT_ONLY_PATTERN = re.compile(r"^\d+\s*[xX]?$")

# A count run straight into the name: "4xLightning Bolt", "4Island". Rejected
# rather than guessed at, since "4Xenagos" could be read two ways.
_GLUED_COUNT_PATTERN = re.compile(r"^\d+(?:[xX](?=\S)|[^\s\dxX])")

# Arena printing suffix: "(LEB) 163", "(NEO) 290a"
_ARENA_SUFFIX_PATTERN = re.compile(r"\s+\([A-Za-z0-9]+\)\s+\S+$")

SECTION_HEADERS = frozenset({"deck", "sideboard", "commander", "companion"})

COMMENT_PREFIXES = ("//", "#")

SPLIT_SEPARATOR = "/"


def _is_skippable(line: str) -> bool:
    if line.startswith(COMMENT_PREFIXES):
        return True
    return line.lower().rstrip(":") in SECTION_HEADERS


def parse_decklist_line(line: str, line_number: int | None = None) -> DecklistLine:
    """
    Parse a single, already trimmed, non-empty card line.

    Args:
        line: One decklist line, e.g. "2x Snapcaster Mage"
        line_number: 1-based position in the decklist, for error reporting

    Returns:
        DecklistLine with the count and the lookup name

    Raises:
        DecklistParseError: If the line has no card name, a zero count,
            a count glued to the name, or a name without any letter or digit
    """
    if _COUNT_ONLY_PATTERN.match(line) or _GLUED_COUNT_PATTERN.match(line):
        raise DecklistParseError(line, line_number)

    match = _LINE_PATTERN.match(line)
    if match is None:
        raise DecklistParseError(line, line_number)

    count = int(match.group("count")) if match.group("count") else 1
    if count < 1:
        raise DecklistParseError(line, line_number)

    name = _ARENA_SUFFIX_PATTERN.sub("", match.group("name"))

    # Split cards: the resolver rebuilds the pair from the first half
    name = name.split(SPLIT_SEPARATOR, 1)[0].strip()

    if not any(ch.isalnum() for ch in name):
        raise DecklistParseError(line, line_number)

    return DecklistLine(count=count, name=name, line_number=line_number, raw=line)


def iter_decklist_lines(text: str) -> Iterator[DecklistLine]:
    """
    Lazily parse a decklist into DecklistLines, in input order.

    Lazy so callers can stop at the first line that breaks a constraint
    without parsing the rest.

    Raises:
        DecklistParseError: At the first malformed card line
    """
    for line_number, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip()

        if not line or _is_skippable(line):
            continue

        yield parse_decklist_line(line, line_number)


def parse_decklist_text(text: str) -> list[DecklistLine]:
    """
    Parse a whole decklist eagerly.

    Returns:
        List of DecklistLines. Empty list if input is empty/whitespace.
    """
    return list(iter_decklist_lines(text))
