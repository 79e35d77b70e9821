"""
Resolved Entity Models.

An Entity is the renderable result of resolving a card name. It is a closed
union of frozen dataclasses:

    Creature | Planeswalker | Plain      single-faced cards
    TwoPart                             split / flip / double-faced / meld
    Unimplemented                       any layout we cannot render yet

INVARIANTS:
- A TwoPart only ever holds single-faced children (depth limit of 1)
- Entities are created fresh per resolution and compare structurally
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True, slots=True)
class Creature:
    name: str
    manacost: str
    typeline: str
    text: str
    power: str = ""
    toughness: str = ""


@dataclass(frozen=True, slots=True)
class Planeswalker:
    name: str
    manacost: str
    typeline: str
    text: str
    loyalty: int | str = 0


@dataclass(frozen=True, slots=True)
class Plain:
    """Any single-faced card that is neither a creature nor a planeswalker."""

    name: str
    manacost: str
    typeline: str
    text: str


SingleFaced = Creature | Planeswalker | Plain


class TwoPartKind(str, Enum):
    """How the two parts of a composite card are physically joined."""

    DOUBLE_FACED = "double-faced"
    SPLIT = "split"
    FLIP = "flip"
    MELD = "meld"


@dataclass(frozen=True, slots=True)
class TwoPart:
    """
    A composite card made of exactly two single-faced parts.

    Attributes:
        kind: How the parts are joined
        first: Front face / left half / unflipped side / first meld half
        second: Back face / right half / flipped side / second meld half
    """

    kind: TwoPartKind
    first: SingleFaced
    second: SingleFaced

    def __post_init__(self) -> None:
        for part in (self.first, self.second):
            if not isinstance(part, Creature | Planeswalker | Plain):
                raise ValueError(f"TwoPart children must be single-faced, got {type(part).__name__}")

    @property
    def name(self) -> str:
        return f"{self.first.name} // {self.second.name}"


@dataclass(frozen=True, slots=True)
class Unimplemented:
    """Placeholder for a card whose layout has no renderer yet."""

    name: str
    layout: str


Entity = Creature | Planeswalker | Plain | TwoPart | Unimplemented


def entity_payload(entity: Entity) -> dict[str, Any]:
    """
    Convert an entity to a JSON-ready dict tagged with its variant.

    Example:
        {"type": "Creature", "name": "Grizzly Bears", ..., "power": "2"}
    """
    if isinstance(entity, TwoPart):
        return {
            "type": "TwoPart",
            "kind": entity.kind.value,
            "name": entity.name,
            "first": entity_payload(entity.first),
            "second": entity_payload(entity.second),
        }
    return {"type": type(entity).__name__, **asdict(entity)}
