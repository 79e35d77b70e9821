from dataclasses import dataclass

from proxygen.models.entity import Entity


@dataclass(frozen=True, slots=True)
class DecklistLine:
    """
    One card line extracted from a decklist. NOT YET RESOLVED.

    Attributes:
        count: Number of copies requested (always positive)
        name: Lookup name, already stripped of count and printing suffix
        line_number: 1-based position in the raw text, None when parsed standalone
        raw: The trimmed line as the user typed it
    """

    count: int
    name: str
    line_number: int | None = None
    raw: str = ""


@dataclass(frozen=True, slots=True)
class ProxyEntry:
    """A resolved decklist line: how many copies of which entity to print."""

    count: int
    entity: Entity
