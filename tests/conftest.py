import json
from pathlib import Path
from typing import Any

import pytest

from proxygen.services.card_database import ReferenceStore, load_reference_store


@pytest.fixture
def sample_cards() -> dict[str, dict[str, Any]]:
    """AllCards-style dataset keyed by card name."""
    return {
        "Snapcaster Mage": {
            "layout": "normal",
            "name": "Snapcaster Mage",
            "manaCost": "{1}{U}",
            "types": ["Creature"],
            "subtypes": ["Human", "Wizard"],
            "text": "Flash\nWhen Snapcaster Mage enters the battlefield, target instant "
            "or sorcery card in your graveyard gains flashback until end of turn. "
            "(You may cast that card from your graveyard for its flashback cost.)",
            "power": "2",
            "toughness": "1",
        },
        "Island": {
            "layout": "normal",
            "name": "Island",
            "supertypes": ["Basic"],
            "types": ["Land"],
            "subtypes": ["Island"],
            "text": "({T}: Add {U}.)",
        },
        "Mountain": {
            "layout": "normal",
            "name": "Mountain",
            "supertypes": ["Basic"],
            "types": ["Land"],
            "subtypes": ["Mountain"],
        },
        "Lightning Bolt": {
            "layout": "normal",
            "name": "Lightning Bolt",
            "manaCost": "{R}",
            "types": ["Instant"],
            "text": "Lightning Bolt deals 3 damage to any target.",
        },
        "Jace Beleren": {
            "layout": "normal",
            "name": "Jace Beleren",
            "manaCost": "{1}{U}{U}",
            "supertypes": ["Legendary"],
            "types": ["Planeswalker"],
            "subtypes": ["Jace"],
            "text": "+2: Each player draws a card.",
            "loyalty": 3,
        },
        "Student of Warfare": {
            "layout": "leveler",
            "name": "Student of Warfare",
            "manaCost": "{W}",
            "types": ["Creature"],
            "subtypes": ["Human", "Knight"],
            "text": "Level up {W}",
            "power": "1",
            "toughness": "1",
        },
        "Lim-Dûl's Vault": {
            "layout": "normal",
            "name": "Lim-Dûl's Vault",
            "manaCost": "{U}{B}",
            "types": ["Instant"],
            "text": "Look at the top five cards of your library.",
        },
        "Fire": {
            "layout": "split",
            "name": "Fire",
            "manaCost": "{1}{R}",
            "types": ["Instant"],
            "text": "Fire deals 2 damage divided as you choose among one or two targets.",
            "names": ["Fire", "Ice"],
        },
        "Ice": {
            "layout": "split",
            "name": "Ice",
            "manaCost": "{1}{U}",
            "types": ["Instant"],
            "text": "Tap target permanent.\nDraw a card.",
            "names": ["Fire", "Ice"],
        },
        "Delver of Secrets": {
            "layout": "double-faced",
            "name": "Delver of Secrets",
            "manaCost": "{U}",
            "types": ["Creature"],
            "subtypes": ["Human", "Wizard"],
            "text": "At the beginning of your upkeep, look at the top card of your library.",
            "power": "1",
            "toughness": "1",
            "names": ["Delver of Secrets", "Insectile Aberration"],
        },
        "Insectile Aberration": {
            "layout": "double-faced",
            "name": "Insectile Aberration",
            "types": ["Creature"],
            "subtypes": ["Human", "Insect"],
            "text": "Flying",
            "power": "3",
            "toughness": "2",
            "names": ["Delver of Secrets", "Insectile Aberration"],
        },
        "Broken Split": {
            "layout": "split",
            "name": "Broken Split",
            "types": ["Sorcery"],
            "names": ["Broken Split"],
        },
        "Nameless Flip": {
            "layout": "flip",
            "name": "Nameless Flip",
            "types": ["Creature"],
        },
        "Dangling Meld": {
            "layout": "meld",
            "name": "Dangling Meld",
            "types": ["Creature"],
            "names": ["Dangling Meld", "Missing Half"],
        },
        "Stairs to Infinity": {
            "layout": "plane",
            "name": "Stairs to Infinity",
            "types": ["Plane"],
            "subtypes": ["Xerex"],
        },
    }


@pytest.fixture
def sample_dataset_text(sample_cards: dict[str, dict[str, Any]]) -> str:
    return json.dumps(sample_cards)


@pytest.fixture
def store(sample_dataset_text: str) -> ReferenceStore:
    """Reference store built from the sample dataset."""
    return load_reference_store(sample_dataset_text)


@pytest.fixture
def card_db_file(sample_dataset_text: str, tmp_path: Path) -> Path:
    """Write the sample dataset to a temporary AllCards.json."""
    db_path = tmp_path / "AllCards.json"
    db_path.write_text(sample_dataset_text, encoding="utf-8")
    return db_path


@pytest.fixture
def sample_decklist() -> str:
    """Sample decklist mixing the accepted line formats."""
    return """Deck
4x Snapcaster Mage
2 Lightning Bolt
Island

// split cards use the first half
1 Fire // Ice
Delver of Secrets"""
