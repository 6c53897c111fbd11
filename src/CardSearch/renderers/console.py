"""Console text output renderers.

Renders a list of `Card` into human-friendly text.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from CardSearch.core.models import Card
from CardSearch.renderers.base import OutputWriter
from CardSearch.utils.log import log


def _fmt_stats(card: Card) -> str:
    if card.power is not None and card.toughness is not None:
        return f"{card.power}/{card.toughness}"
    if card.loyalty is not None:
        return f"Loyalty {card.loyalty}"
    return ""


def render_text(cards: Iterable[Card]) -> str:
    """Render cards into a human-readable text block.

    Args:
        cards: Iterable of cards.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for idx, card in enumerate(cards, start=1):
        header = f"{idx}. {card.name}"
        if card.mana_cost:
            header += f"  {card.mana_cost}"
        lines.append(header)
        if card.type_line:
            stats = _fmt_stats(card)
            lines.append(f"   {card.type_line}" + (f"  ({stats})" if stats else ""))
        released = card.released_at.strftime("%Y-%m-%d") if card.released_at else "-"
        lines.append(f"   Set: {card.set_name or '-'} ({card.set.upper()} #{card.collector_number})  {card.rarity}  {released}")
        if card.oracle_text:
            for text_line in card.oracle_text.splitlines():
                lines.append(f"   | {text_line}")
        if card.scryfall_uri:
            lines.append(f"   URL: {card.scryfall_uri}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_result(self, cards: Sequence[Card], label: str) -> None:
        log.info("%s: %d card(s)", label, len(cards))
        for line in render_text(cards).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
