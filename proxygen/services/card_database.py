"""
Card database service.

Loads the MTGJSON AllCards snapshot once and indexes it by sanitized name.
The resulting ReferenceStore is read-only and safe to share between requests.
"""

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from proxygen.config import DATA_DIR
from proxygen.models.card_record import Layout, RawRecord
from proxygen.models.failure import DatasetLoadError
from proxygen.services.name_sanitizer import sanitize

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_PATH = DATA_DIR / "AllCards.json"


class ReferenceStore:
    """
    Immutable index from sanitized card name to RawRecord.

    Build it with load_reference_store() or load_card_database(); the
    constructor only wraps an already-keyed mapping.

    Usage:
        store = load_reference_store(raw_text)
        record = store.get("snapcaster mage")
    """

    __slots__ = ("_records",)

    def __init__(self, records: Mapping[str, RawRecord]) -> None:
        self._records: Mapping[str, RawRecord] = MappingProxyType(dict(records))

    def get(self, name: str) -> RawRecord | None:
        """
        Look up a card by name.

        The name is sanitized first, so any casing, spacing or accent
        spelling of a dataset name finds the same record.

        Returns:
            The record, or None if no card sanitizes to the same key.
        """
        return self._records.get(sanitize(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and sanitize(name) in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"ReferenceStore({len(self._records)} cards)"


def _iter_raw_entries(dataset: Any) -> Iterator[tuple[str | None, Any]]:
    """Yield (dataset key, raw record) pairs from either dataset shape."""
    if isinstance(dataset, dict):
        yield from dataset.items()
    elif isinstance(dataset, list):
        for entry in dataset:
            yield None, entry
    else:
        raise DatasetLoadError(
            f"Expected a JSON object or array of cards, got {type(dataset).__name__}"
        )


def _parse_records(dataset: Any) -> list[RawRecord]:
    """
    Validate every dataset entry into a RawRecord, in dataset order.

    Entries that are not objects or fail validation are dropped with a
    warning; one bad card should not take the whole service down.
    """
    records: list[RawRecord] = []
    dropped = 0

    for key, entry in _iter_raw_entries(dataset):
        if not isinstance(entry, dict):
            dropped += 1
            logger.warning("Dropping non-object dataset entry %r", key)
            continue

        # AllCards.json is keyed by name; the key fills in a missing name
        if key is not None and "name" not in entry:
            entry = {"name": key, **entry}

        try:
            records.append(RawRecord.model_validate(entry))
        except ValidationError as e:
            dropped += 1
            logger.warning(
                "Dropping invalid dataset entry %r: %d validation error(s)",
                key or entry.get("name"),
                e.error_count(),
            )

    if dropped:
        logger.warning("Dropped %d invalid dataset entries", dropped)

    return records


def load_reference_store(
    raw_dataset_text: str,
    *,
    strict: bool = False,
    index_unsupported_layouts: bool = True,
) -> ReferenceStore:
    """
    Build the reference store from raw dataset text.

    Called once at process start. Steps (order matters):
    1. Parse the JSON dataset into RawRecords
    2. Optionally drop records whose layout we cannot render
    3. Re-key every record by sanitized name; on collision the later
       record wins (or, with strict=True, loading fails)

    Args:
        raw_dataset_text: Contents of AllCards.json (object keyed by name)
            or a JSON array of card objects
        strict: Fail instead of overwriting when two names share a key
        index_unsupported_layouts: Keep records with unknown layouts so they
            resolve to an Unimplemented placeholder

    Returns:
        ReferenceStore keyed by sanitized name.

    Raises:
        DatasetLoadError: If the text is not well-formed JSON, has the wrong
            shape, or (strict only) contains a name collision
    """
    try:
        dataset = json.loads(raw_dataset_text)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"Card dataset is not valid JSON: {e}") from e

    records = _parse_records(dataset)

    if not index_unsupported_layouts:
        supported = [r for r in records if r.kind is not Layout.OTHER]
        if len(supported) != len(records):
            logger.info(
                "Filtered %d records with unsupported layouts",
                len(records) - len(supported),
            )
        records = supported

    keyed: dict[str, RawRecord] = {}
    for record in records:
        key = sanitize(record.name)
        existing = keyed.get(key)
        if existing is not None and existing.name != record.name:
            if strict:
                raise DatasetLoadError(
                    f"Card names {existing.name!r} and {record.name!r} "
                    f"both sanitize to {key!r}"
                )
            logger.warning(
                "Name collision on %r: %r replaces %r",
                key,
                record.name,
                existing.name,
            )
        keyed[key] = record

    logger.info("Indexed %d cards", len(keyed))
    return ReferenceStore(keyed)


def load_card_database(
    path: Path | None = None,
    *,
    strict: bool = False,
    index_unsupported_layouts: bool = True,
) -> ReferenceStore:
    """
    Load the reference store from a dataset file.

    Args:
        path: Path to JSON file. Defaults to data/AllCards.json
        strict: See load_reference_store
        index_unsupported_layouts: See load_reference_store

    Returns:
        ReferenceStore keyed by sanitized name.

    Raises:
        FileNotFoundError: If the dataset file doesn't exist
        DatasetLoadError: If the file cannot be parsed
    """
    if path is None:
        path = DEFAULT_DATABASE_PATH

    if not path.exists():
        raise FileNotFoundError(
            f"Card database not found at {path}. "
            "Download AllCards.json from mtgjson.com and place it there."
        )

    logger.info("Loading card database from %s", path)
    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DatasetLoadError(f"Card dataset is not valid UTF-8: {e}") from e

    return load_reference_store(
        raw,
        strict=strict,
        index_unsupported_layouts=index_unsupported_layouts,
    )
