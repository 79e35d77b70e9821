"""
Proxy API endpoints.

Turns a decklist into resolved entities (JSON) or a printable sheet (HTML).
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from proxygen.api.dependencies import get_reference_store
from proxygen.config import settings
from proxygen.models.entity import entity_payload
from proxygen.models.failure import ApiResponse, create_success
from proxygen.services.card_database import ReferenceStore
from proxygen.services.decklist import parse_decklist, total_copies
from proxygen.services.renderer import render_document

router = APIRouter(prefix="/proxies", tags=["proxies"])


class DecklistRequest(BaseModel):
    """Request model for resolving a decklist."""

    decklist: str = Field(
        ...,
        description="Raw decklist text, one card per line",
        examples=["4x Lightning Bolt\n2 Fire // Ice\nSnapcaster Mage"],
    )


class ProxyLine(BaseModel):
    """One resolved decklist line."""

    count: int
    entity: dict[str, Any] = Field(
        ...,
        description="Resolved card, tagged with its variant under 'type'",
    )


class ProxySheet(BaseModel):
    """All resolved lines of a decklist."""

    total_copies: int
    entries: list[ProxyLine] = Field(default_factory=list)


@router.post("", response_model=ApiResponse[ProxySheet])
async def resolve_proxies(
    request: DecklistRequest,
    store: Annotated[ReferenceStore, Depends(get_reference_store)],
) -> ApiResponse[ProxySheet]:
    """
    Resolve a decklist to card entities.

    Any parse or resolution failure rejects the whole decklist; the error
    handler turns it into a known-failure envelope.
    """
    entries = parse_decklist(store, request.decklist, settings.max_total_count)

    sheet = ProxySheet(
        total_copies=total_copies(entries),
        entries=[
            ProxyLine(count=entry.count, entity=entity_payload(entry.entity))
            for entry in entries
        ],
    )
    return create_success(sheet)


@router.post("/html", response_class=HTMLResponse)
async def render_proxies(
    decklist: Annotated[str, Form()],
    store: Annotated[ReferenceStore, Depends(get_reference_store)],
) -> HTMLResponse:
    """Render a decklist submitted from an HTML form as a printable sheet."""
    entries = parse_decklist(store, decklist, settings.max_total_count)
    return HTMLResponse(render_document(entries, title=settings.app_name))
