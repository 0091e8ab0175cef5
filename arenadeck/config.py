from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "ArenaDeck"
    debug: bool = False
    log_level: str = "INFO"

    card_database_path: Path = DATA_DIR / "cards.json"
    set_registry_path: Path = DATA_DIR / "sets.json"

    # Deck art shown when a record carries no deckTileId
    default_deck_tile: int = 67003


settings = Settings()


# =============================================================================
# CARD RULES
# =============================================================================

# Virtual printing that Arena cannot import; exports redirect to a reprint
REPRINT_ONLY_SET = "Mythic Edition"

# Copies of a non-basic card a deck can hold
MAX_COPIES = 4
