from proxygen.parsers.decklist import (
    iter_decklist_lines,
    parse_decklist_line,
    parse_decklist_text,
)

__all__ = [
    "iter_decklist_lines",
    "parse_decklist_line",
    "parse_decklist_text",
]
