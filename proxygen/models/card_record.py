"""
Reference dataset records.

A RawRecord is one entry of the MTGJSON AllCards dataset, validated once at
load time. Only the fields needed to build a proxy are kept; every other key
in the dataset is ignored.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Layout(Enum):
    """Card layouts the resolver knows how to compose."""

    NORMAL = "normal"
    LEVELER = "leveler"
    SPLIT = "split"
    FLIP = "flip"
    DOUBLE_FACED = "double-faced"
    MELD = "meld"
    OTHER = "other"

    @classmethod
    def from_raw(cls, value: str | None) -> Layout:
        """Map a dataset layout string to a Layout, OTHER for anything unknown."""
        if value is None:
            return cls.OTHER
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.OTHER

    @property
    def is_composite(self) -> bool:
        return self in COMPOSITE_LAYOUTS

    @property
    def is_supported(self) -> bool:
        return self is not Layout.OTHER


COMPOSITE_LAYOUTS = frozenset({Layout.SPLIT, Layout.FLIP, Layout.DOUBLE_FACED, Layout.MELD})


class RawRecord(BaseModel):
    """
    One validated dataset entry.

    Attributes:
        layout: Layout string exactly as it appears in the dataset
        kind: Layout discriminant decided at load time
        name: Canonical card name
        mana_cost: Mana cost string, e.g. "{1}{U}" (dataset key "manaCost")
        supertypes: e.g. ["Legendary"]
        types: e.g. ["Creature"]
        subtypes: e.g. ["Human", "Wizard"]
        text: Rules text, newline separated
        power: Power as printed ("*" and "1+*" are legal values)
        toughness: Toughness as printed
        loyalty: Starting loyalty for planeswalkers
        names: Ordered part names for split/flip/double-faced/meld cards
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    layout: str
    kind: Layout = Layout.OTHER
    name: str = Field(..., min_length=1)
    mana_cost: str | None = Field(default=None, alias="manaCost")
    supertypes: tuple[str, ...] | None = None
    types: tuple[str, ...] | None = None
    subtypes: tuple[str, ...] | None = None
    text: str | None = None
    power: str | None = None
    toughness: str | None = None
    loyalty: int | str | None = None
    names: tuple[str, ...] | None = None

    @model_validator(mode="before")
    @classmethod
    def _classify_layout(cls, data: Any) -> Any:
        if isinstance(data, dict) and "kind" not in data:
            layout = data.get("layout")
            data = {**data, "kind": Layout.from_raw(layout if isinstance(layout, str) else None)}
        return data

    @field_validator("power", "toughness", mode="before")
    @classmethod
    def _stringify_stat(cls, value: Any) -> Any:
        # Older dataset snapshots store printed stats as numbers
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value
