"""
Entity Resolution Service.

Resolves card names to renderable Entity values using the reference store.

INVARIANTS:
1. Resolution reads the injected ReferenceStore ONLY (no I/O, no globals)
2. Resolution failures are TERMINAL (KnownError), never partial
3. Composite parts are resolved as single-faced cards, so a TwoPart never
   nests another TwoPart and recursion is bounded at depth 1
4. Unknown layouts resolve to Unimplemented, which is a success
"""

from proxygen.models.card_record import Layout, RawRecord
from proxygen.models.entity import (
    Creature,
    Entity,
    Plain,
    Planeswalker,
    SingleFaced,
    TwoPart,
    TwoPartKind,
    Unimplemented,
)
from proxygen.models.failure import (
    InvalidCardNameError,
    MulticardMalformedNamesError,
    MulticardNoNamesError,
)
from proxygen.services.card_database import ReferenceStore
from proxygen.services.name_sanitizer import sanitize

TYPELINE_SEPARATOR = "—"

_TWO_PART_KINDS: dict[Layout, TwoPartKind] = {
    Layout.DOUBLE_FACED: TwoPartKind.DOUBLE_FACED,
    Layout.SPLIT: TwoPartKind.SPLIT,
    Layout.FLIP: TwoPartKind.FLIP,
    Layout.MELD: TwoPartKind.MELD,
}


def build_typeline(record: RawRecord) -> str:
    """
    Build a printed type line from a record's type lists.

    Example:
        supertypes=["Legendary"], types=["Creature"], subtypes=["Elf", "Druid"]
        -> "Legendary Creature — Elf Druid"
    """
    typeline = " ".join([*(record.supertypes or ()), *(record.types or ())])
    if record.subtypes:
        typeline = f"{typeline} {TYPELINE_SEPARATOR} {' '.join(record.subtypes)}".lstrip()
    return typeline


def build_single_faced(record: RawRecord) -> SingleFaced:
    """
    Classify a record as a creature, planeswalker or plain card.

    Creature wins over Planeswalker when a card somehow has both types.
    """
    types = record.types or ()
    manacost = record.mana_cost or ""
    typeline = build_typeline(record)
    text = record.text or ""

    if "Creature" in types:
        return Creature(
            name=record.name,
            manacost=manacost,
            typeline=typeline,
            text=text,
            power=record.power or "",
            toughness=record.toughness or "",
        )
    if "Planeswalker" in types:
        return Planeswalker(
            name=record.name,
            manacost=manacost,
            typeline=typeline,
            text=text,
            loyalty=record.loyalty if record.loyalty is not None else 0,
        )
    return Plain(name=record.name, manacost=manacost, typeline=typeline, text=text)


class EntityResolver:
    """
    Resolves card names -> Entity using an injected ReferenceStore.

    The resolver holds no state besides the store, so one instance can be
    shared across threads, and tests can pass a small fixture store.

    Usage:
        resolver = EntityResolver(store)
        entity = resolver.resolve("Delver of Secrets")
    """

    def __init__(self, store: ReferenceStore) -> None:
        self._store = store

    def _lookup(self, name: str) -> RawRecord:
        record = self._store.get(name)
        if record is None:
            raise InvalidCardNameError(sanitize(name))
        return record

    def resolve(self, name: str) -> Entity:
        """
        Resolve a card name to a fully built Entity.

        Args:
            name: Card name in any casing/spacing; sanitized before lookup

        Returns:
            Creature, Planeswalker or Plain for single-faced layouts,
            TwoPart for split/flip/double-faced/meld,
            Unimplemented for any other layout.

        Raises:
            InvalidCardNameError: Name (or a composite part) not in the store
            MulticardNoNamesError: Composite record without a part list
            MulticardMalformedNamesError: Composite part list not of length 2
        """
        record = self._lookup(name)

        if record.kind in (Layout.NORMAL, Layout.LEVELER):
            return build_single_faced(record)

        if record.kind.is_composite:
            return self._resolve_composite(record)

        return Unimplemented(name=record.name, layout=record.layout)

    def resolve_face(self, name: str) -> SingleFaced:
        """
        Resolve a card name as if its layout were "normal".

        This is how composite parts are resolved. In AllCards each half of
        a split card has its own entry carrying the split layout; forcing
        the normal layout stops it from expanding into the pair again.

        Raises:
            InvalidCardNameError: Name not in the store
        """
        return build_single_faced(self._lookup(name))

    def _resolve_composite(self, record: RawRecord) -> TwoPart:
        if record.names is None:
            raise MulticardNoNamesError(record.name)
        if len(record.names) != 2:
            raise MulticardMalformedNamesError(record.name, record.names)

        first_name, second_name = record.names
        return TwoPart(
            kind=_TWO_PART_KINDS[record.kind],
            first=self.resolve_face(first_name),
            second=self.resolve_face(second_name),
        )


def resolve_entity(store: ReferenceStore, name: str) -> Entity:
    """Convenience wrapper: resolve a single name against a store."""
    return EntityResolver(store).resolve(name)
