"""Resolve a deck id to the ordered list of its card image URLs.

The deck endpoint returns the deck with linked card definitions::

    {
      "data": {"name": "...", "_links": {"cards": ["<card id>", ...]}},
      "_linked": {"cards": [{"id": "<card id>", "front_image": "<url>"}, ...]}
    }

``data._links.cards`` lists one id per card in the deck, so repeated
cards appear once per copy. ``_linked.cards`` defines each distinct card.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from decksheet.client import KeyforgeClient
from decksheet.errors import FormatError
from decksheet.progress import NullListener, Progress, ProgressListener

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CardDefinition:
    id: str
    front_image: str


@dataclass(frozen=True)
class DeckData:
    """Typed view of the deck payload."""

    card_ids: tuple[str, ...]
    cards: tuple[CardDefinition, ...]
    name: Optional[str] = None

    def image_urls(self) -> list[str]:
        """Map every card id, in deck order, to its front image URL."""
        lookup = {card.id: card.front_image for card in self.cards}
        urls = []
        for card_id in self.card_ids:
            if card_id not in lookup:
                raise FormatError(f"Deck references unknown card id {card_id!r}")
            urls.append(lookup[card_id])
        return urls


def _require(obj: Any, key: str, kind: type, where: str) -> Any:
    if not isinstance(obj, dict):
        raise FormatError(f"Expected an object at {where}")
    if key not in obj:
        raise FormatError(f"Missing field {where}.{key}")
    value = obj[key]
    if not isinstance(value, kind):
        raise FormatError(f"Field {where}.{key} must be {kind.__name__}, got {type(value).__name__}")
    return value


def parse_deck_json(text: str) -> DeckData:
    """Decode deck JSON into ``DeckData``.

    Raises:
        FormatError: On invalid JSON or any missing or mistyped field
    """
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise FormatError("Invalid JSON format") from e

    data = _require(payload, "data", dict, "$")
    links = _require(data, "_links", dict, "data")
    raw_ids = _require(links, "cards", list, "data._links")
    linked = _require(payload, "_linked", dict, "$")
    raw_cards = _require(linked, "cards", list, "_linked")

    card_ids = []
    for i, card_id in enumerate(raw_ids):
        if not isinstance(card_id, str):
            raise FormatError(f"data._links.cards[{i}] must be a string")
        card_ids.append(card_id)

    cards = []
    seen = set()
    for i, raw in enumerate(raw_cards):
        where = f"_linked.cards[{i}]"
        card = CardDefinition(
            id=_require(raw, "id", str, where),
            front_image=_require(raw, "front_image", str, where),
        )
        if card.id in seen:
            raise FormatError(f"Card id {card.id!r} is defined more than once")
        seen.add(card.id)
        cards.append(card)

    name = data.get("name")
    return DeckData(
        card_ids=tuple(card_ids),
        cards=tuple(cards),
        name=name if isinstance(name, str) else None,
    )


class DeckResolver:
    """Fetches a deck and lists its card image URLs in deck order."""

    def __init__(
        self,
        client: Optional[KeyforgeClient] = None,
        listener: Optional[ProgressListener] = None,
    ):
        self.client = client or KeyforgeClient()
        self.listener = listener or NullListener()

    def resolve(self, deck_id: str) -> list[str]:
        """Return one image URL per card, duplicates preserved.

        Raises:
            NetworkError: If the deck cannot be downloaded
            FormatError: If the deck data is malformed, references an
                unknown card, or contains no cards
        """
        self.listener.notify(Progress("Connecting"))
        text = self.client.get_deck_text(deck_id)

        self.listener.notify(Progress("Parsing deck data"))
        try:
            deck = parse_deck_json(text)
            urls = deck.image_urls()
        except FormatError as e:
            raise FormatError(f"Invalid deck data for {deck_id}") from e

        if not urls:
            raise FormatError(f"Deck {deck_id} has no cards")

        logger.info("Resolved deck %s: %d cards, %d distinct",
                    deck.name or deck_id, len(urls), len(set(urls)))
        return urls
