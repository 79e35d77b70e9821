"""
Proxygen services.

Reference store loading, name sanitizing, entity resolution, decklist
resolution and proxy rendering.
"""

from proxygen.services.card_database import (
    ReferenceStore,
    load_card_database,
    load_reference_store,
)
from proxygen.services.decklist import parse_decklist, total_copies
from proxygen.services.entity_resolver import (
    EntityResolver,
    build_single_faced,
    build_typeline,
    resolve_entity,
)
from proxygen.services.name_sanitizer import fold_to_ascii, sanitize
from proxygen.services.renderer import render_document, render_entity

__all__ = [
    # Reference store
    "ReferenceStore",
    "load_card_database",
    "load_reference_store",
    # Name sanitizer
    "fold_to_ascii",
    "sanitize",
    # Entity resolver
    "EntityResolver",
    "build_single_faced",
    "build_typeline",
    "resolve_entity",
    # Decklist entry point
    "parse_decklist",
    "total_copies",
    # Rendering
    "render_document",
    "render_entity",
]
