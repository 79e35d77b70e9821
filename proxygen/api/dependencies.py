"""Shared FastAPI dependencies."""

from fastapi import Request

from proxygen.models.failure import FailureKind, KnownError
from proxygen.services.card_database import ReferenceStore


def get_reference_store(request: Request) -> ReferenceStore:
    """
    Return the reference store loaded during application startup.

    Tests override this dependency with a small fixture store.

    Raises:
        KnownError: 503 if the store was never loaded
    """
    store: ReferenceStore | None = getattr(request.app.state, "reference_store", None)
    if store is None:
        raise KnownError(
            kind=FailureKind.SERVICE_UNAVAILABLE,
            message="Card database not available. Please try again later.",
            status_code=503,
        )
    return store
