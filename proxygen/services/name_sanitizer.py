"""
Card Name Sanitizer.

Turns a human-entered or dataset-supplied card name into the key used by the
reference store. Both sides of every lookup go through the same function, so
"  SNAPCASTER   mage " and "Snapcaster Mage" find the same record, and
"Lim-Dûl's Vault" can be typed as "Lim-Dul's Vault".
"""

import unicodedata

# Letterforms that Unicode decomposition leaves untouched. Decomposition can
# also produce them ("ǽ" -> "æ"), so the map is applied after it.
_LETTERFORM_MAP = str.maketrans(
    {
        "æ": "ae",
        "Æ": "AE",
        "œ": "oe",
        "Œ": "OE",
        "ø": "o",
        "Ø": "O",
        "ß": "ss",
        "ẞ": "SS",
        "đ": "d",
        "Đ": "D",
        "ð": "d",
        "Ð": "D",
        "ł": "l",
        "Ł": "L",
        "þ": "th",
        "Þ": "TH",
        "ı": "i",
        "’": "'",
        "‘": "'",
        "ʼ": "'",
        "`": "'",
        "‐": "-",
        "‑": "-",
        "‒": "-",
        "–": "-",
        "—": "-",
    }
)

_KEPT_PUNCTUATION = frozenset(" -,'")


def _collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def fold_to_ascii(text: str) -> str:
    """
    Map non-ASCII letterforms to their closest ASCII spelling.

    "û" -> "u", "æ" -> "ae", "’" -> "'". Characters with no ASCII
    equivalent are returned unchanged.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.translate(_LETTERFORM_MAP)


def sanitize(name: str) -> str:
    """
    Return the canonical lookup key for a card name.

    Steps, in order:
    - lowercase
    - collapse whitespace runs to single spaces and trim
    - fold accented and ligature letterforms to ASCII
    - drop everything but letters, digits, spaces, hyphens, commas, apostrophes

    Dropping characters can leave doubled spaces ("Fire // Ice"), so
    whitespace is collapsed again at the end. The result is a fixed point:
    sanitize(sanitize(name)) == sanitize(name).
    """
    key = _collapse_whitespace(name.lower())
    key = fold_to_ascii(key).lower()
    key = "".join(ch for ch in key if ch.isalnum() or ch in _KEPT_PUNCTUATION)
    return _collapse_whitespace(key)
