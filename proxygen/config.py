from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent.parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Proxygen"
    debug: bool = False
    log_level: str = "INFO"

    # MTGJSON AllCards.json snapshot, fetched outside this service
    card_database_path: Path = DATA_DIR / "AllCards.json"

    # Ceiling on the total number of copies a single decklist may request
    max_total_count: int = 250

    # When True, two dataset names that sanitize to the same key abort loading
    # instead of letting the later record win
    strict_name_collisions: bool = False

    # When False, records with layouts we cannot render are dropped at load
    # time instead of resolving to an "unimplemented" placeholder
    index_unsupported_layouts: bool = True


settings = Settings()
