"""
Render a decklist file to a printable HTML proxy sheet.

Usage:
    python -m proxygen.jobs.render_proxies deck.txt --output proxies.html
"""

import argparse
import logging
import sys
from pathlib import Path

from proxygen.config import settings
from proxygen.models.failure import KnownError
from proxygen.services.card_database import load_card_database
from proxygen.services.decklist import parse_decklist, total_copies
from proxygen.services.renderer import render_document

logger = logging.getLogger(__name__)


def run_render(
    decklist_path: Path,
    dataset_path: Path,
    output_path: Path | None,
    max_total_count: int,
) -> int:
    """
    Load the dataset, resolve the decklist and write the sheet.

    Returns:
        Number of proxies rendered

    Raises:
        FileNotFoundError: If the decklist or dataset file doesn't exist
        UnicodeDecodeError: If the decklist file is not UTF-8 text
        KnownError: If the dataset cannot be loaded or the decklist is rejected
    """
    store = load_card_database(
        dataset_path,
        strict=settings.strict_name_collisions,
        index_unsupported_layouts=settings.index_unsupported_layouts,
    )

    entries = parse_decklist(
        store,
        decklist_path.read_text(encoding="utf-8"),
        max_total_count,
    )
    document = render_document(entries, title=decklist_path.stem)

    if output_path is None:
        sys.stdout.write(document)
    else:
        output_path.write_text(document, encoding="utf-8")
        logger.info("Wrote %s", output_path)

    return total_copies(entries)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Render a decklist as printable proxies")
    parser.add_argument("decklist", type=Path, help="Decklist text file, one card per line")
    parser.add_argument(
        "--dataset",
        type=Path,
        default=settings.card_database_path,
        help="MTGJSON AllCards.json snapshot",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write HTML here instead of stdout",
    )
    parser.add_argument(
        "--max-total-count",
        type=int,
        default=settings.max_total_count,
        help="Reject decklists requesting more copies than this",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        count = run_render(args.decklist, args.dataset, args.output, args.max_total_count)
    except (FileNotFoundError, UnicodeDecodeError, KnownError) as e:
        logger.error("Failed to render proxies: %s", e)
        return 1

    logger.info("Rendered %d proxies", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
