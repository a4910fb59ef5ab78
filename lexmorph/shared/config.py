# lexmorph/shared/config.py
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


# The standard morph-type table shipped inside the package.
BUNDLED_MORPH_TYPES_PATH = Path(__file__).resolve().parent.parent / "data" / "morph_types.json"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "lexmorph"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "lexmorph"

    # --- Morph-type table ---
    # None means "use the bundled standard table"
    MORPH_TYPES_PATH: Optional[str] = None

    # --- Writing systems ---
    VERNACULAR_WS_IDS: List[int] = [1]
    ANALYSIS_WS_IDS: List[int] = [2]
    DEFAULT_VERNACULAR_WS: Optional[int] = None

    # --- Caching ---
    MORPH_INDEX_CACHE_ENABLED: bool = True

    @property
    def MORPH_TYPES_FILE(self) -> Path:
        """Resolved path of the morph-type table to load."""
        if self.MORPH_TYPES_PATH:
            return Path(self.MORPH_TYPES_PATH).expanduser()
        return BUNDLED_MORPH_TYPES_PATH

    @property
    def DEFAULT_VERNACULAR(self) -> int:
        """The default vernacular writing system (first vernacular if not set)."""
        if self.DEFAULT_VERNACULAR_WS is not None:
            return self.DEFAULT_VERNACULAR_WS
        return self.VERNACULAR_WS_IDS[0]

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LEXMORPH_", extra="ignore")


settings = Settings()
