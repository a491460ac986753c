"""Runtime settings for the deck sheet downloader.

Values come from environment variables. A ``.env`` file in the current
directory is loaded first, if present.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from decksheet import __version__
from decksheet.errors import ConfigurationError

DEFAULT_DECK_URL = "https://www.keyforgegame.com/api/decks/{id}/?links=cards"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration.

    Attributes:
        deck_url: Deck endpoint template; ``{id}`` is replaced by the deck id
        timeout: Per-request timeout in seconds (None = no timeout)
        user_agent: User-Agent header sent with every request
        log_level: Logging level name for the console handler
    """

    deck_url: str = DEFAULT_DECK_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT
    user_agent: str = f"keyforge-deck-sheet/{__version__}"
    log_level: str = DEFAULT_LOG_LEVEL

    def deck_url_for(self, deck_id: str) -> str:
        return self.deck_url.format(id=deck_id)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return DEFAULT_TIMEOUT
    raw = raw.strip()
    if raw == "":
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"DECKSHEET_TIMEOUT must be a number, got {raw!r}") from e
    if value < 0:
        raise ConfigurationError(f"DECKSHEET_TIMEOUT must not be negative, got {raw!r}")
    return value or None


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Build settings from the environment.

    Args:
        env_file: Optional .env path (default: ./.env when it exists)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a value cannot be parsed
    """
    env_path = env_file or (Path.cwd() / ".env")
    if env_path.exists():
        load_dotenv(env_path)

    deck_url = os.environ.get("DECKSHEET_DECK_URL") or DEFAULT_DECK_URL
    if "{id}" not in deck_url:
        raise ConfigurationError(f"DECKSHEET_DECK_URL must contain '{{id}}': {deck_url}")

    log_level = (os.environ.get("DECKSHEET_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

    return Settings(
        deck_url=deck_url,
        timeout=_parse_timeout(os.environ.get("DECKSHEET_TIMEOUT")),
        user_agent=os.environ.get("DECKSHEET_USER_AGENT") or Settings.user_agent,
        log_level=log_level,
    )
