"""JSON output renderers.

Renders a list of `Card` into JSON-serializable objects and provides
`JsonFileWriter`, which writes one file per command run.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Sequence

from CardSearch.core.models import Card
from CardSearch.renderers.base import OutputWriter
from CardSearch.utils.log import log


def render_json(cards: Iterable[Card]) -> list[dict[str, Any]]:
    """Render cards into JSON-serializable Python objects.

    Args:
        cards: Iterable of cards.

    Returns:
        A list of dicts, one per card. Fields the service sent that have no
        typed counterpart are kept under `extra`.
    """
    out: list[dict[str, Any]] = []
    for card in cards:
        out.append(
            {
                "id": card.id,
                "oracle_id": card.oracle_id,
                "name": card.name,
                "lang": card.lang,
                "released_at": card.released_at.isoformat() if card.released_at else None,
                "set": card.set,
                "set_name": card.set_name,
                "collector_number": card.collector_number,
                "rarity": card.rarity,
                "type_line": card.type_line,
                "oracle_text": card.oracle_text,
                "mana_cost": card.mana_cost,
                "cmc": card.cmc,
                "power": card.power,
                "toughness": card.toughness,
                "loyalty": card.loyalty,
                "colors": list(card.colors),
                "color_identity": list(card.color_identity),
                "prices": dict(card.prices),
                "legalities": dict(card.legalities),
                "scryfall_uri": card.scryfall_uri,
                "extra": dict(card.extra),
            }
        )
    return out


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str, *, indent: int = 2) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
            indent: Indentation passed to `json.dumps`.
        """
        self.output_dir = Path(base_dir) / "json"
        self.indent = indent
        self.all_results: list[dict[str, Any]] = []

    def write_result(self, cards: Sequence[Card], label: str) -> None:
        """Accumulate a result for later writing."""
        self.all_results.append({"query": label, "count": len(cards), "cards": render_json(cards)})

    def finalize(self, action: str) -> None:
        """Write accumulated results to JSON file.

        Args:
            action: The CLI command name (used in filename).
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=self.indent or None)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
