from proxygen.models.card_record import COMPOSITE_LAYOUTS, Layout, RawRecord
from proxygen.models.decklist import DecklistLine, ProxyEntry
from proxygen.models.entity import (
    Creature,
    Entity,
    Plain,
    Planeswalker,
    SingleFaced,
    TwoPart,
    TwoPartKind,
    Unimplemented,
    entity_payload,
)
from proxygen.models.failure import (
    ApiResponse,
    DatasetLoadError,
    DecklistParseError,
    FailureDetail,
    FailureKind,
    InvalidCardNameError,
    KnownError,
    MulticardMalformedNamesError,
    MulticardNoNamesError,
    OutcomeType,
    TooManyCardsError,
    create_known_failure,
    create_success,
    create_unknown_failure,
)

__all__ = [
    "ApiResponse",
    "COMPOSITE_LAYOUTS",
    "Creature",
    "DatasetLoadError",
    "DecklistLine",
    "DecklistParseError",
    "Entity",
    "FailureDetail",
    "FailureKind",
    "InvalidCardNameError",
    "KnownError",
    "Layout",
    "MulticardMalformedNamesError",
    "MulticardNoNamesError",
    "OutcomeType",
    "Plain",
    "Planeswalker",
    "ProxyEntry",
    "RawRecord",
    "SingleFaced",
    "TooManyCardsError",
    "TwoPart",
    "TwoPartKind",
    "Unimplemented",
    "create_known_failure",
    "create_success",
    "create_unknown_failure",
    "entity_payload",
]
