"""
Decklist resolution service.

The single per-request entry point: raw decklist text in, ordered
(count, Entity) pairs out. All failures abort the whole decklist; callers
never see partial results.
"""

import logging
from collections.abc import Iterable

from proxygen.models.decklist import ProxyEntry
from proxygen.models.failure import KnownError, TooManyCardsError
from proxygen.parsers.decklist import iter_decklist_lines
from proxygen.services.card_database import ReferenceStore
from proxygen.services.entity_resolver import EntityResolver

logger = logging.getLogger(__name__)


def parse_decklist(
    store: ReferenceStore,
    text: str,
    max_total_count: int,
) -> list[ProxyEntry]:
    """
    Parse and resolve a decklist.

    Lines are handled one at a time: parse, add to the running total, check
    the ceiling, then resolve. The ceiling check comes before resolution so
    that a decklist over the limit stops at the offending line.

    Args:
        store: Reference store to resolve names against
        text: Raw multi-line decklist
        max_total_count: Maximum total copies across all lines

    Returns:
        One ProxyEntry per card line, in input order

    Raises:
        DecklistParseError: A line has no recognizable count/name
        TooManyCardsError: Running total exceeded max_total_count
        InvalidCardNameError: A name is not in the store
        MulticardNoNamesError / MulticardMalformedNamesError: Broken
            composite record in the dataset
    """
    resolver = EntityResolver(store)
    entries: list[ProxyEntry] = []
    running_total = 0

    try:
        for line in iter_decklist_lines(text):
            running_total += line.count
            if running_total > max_total_count:
                raise TooManyCardsError(max_total_count, running_total, line.raw)

            entries.append(ProxyEntry(count=line.count, entity=resolver.resolve(line.name)))
    except KnownError as e:
        logger.warning("Decklist rejected (%s): %s", e.kind.value, e.message)
        raise

    logger.info("Resolved decklist: %d lines, %d copies", len(entries), running_total)
    return entries


def total_copies(entries: Iterable[ProxyEntry]) -> int:
    """Total number of proxies a resolved decklist will print."""
    return sum(entry.count for entry in entries)
