# roi_calculator/config/settings.py

from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings

CONFIG_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """
    Central configuration for the ROI Calculator service.
    Values come from the environment or a local .env file.
    """

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # LLM (Gemini via LangChain). Without a key the proxy endpoints are disabled.
    GOOGLE_API_KEY: Optional[str] = None
    LLM_MODEL: str = "gemini-2.0-flash"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_OUTPUT_TOKENS: int = 1024
    LLM_REQUEST_TIMEOUT: int = 60

    # ROI band table (colours + report recommendations)
    ROI_BANDS_FILE: Path = CONFIG_DIR / "roi_bands.yaml"

    # Chart portfolio is process-wide; oldest points drop past this size
    PORTFOLIO_MAX_POINTS: int = 500

    # Defaults substituted by the request layer for omitted cost fields
    DEFAULT_HOURLY_RATE: float = 50.0
    DEFAULT_NUM_SELLERS: float = 1.0
    DEFAULT_DEV_COST: float = 0.0
    DEFAULT_MAINTENANCE_COST: float = 0.0

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def llm_configured(self) -> bool:
        return bool(self.GOOGLE_API_KEY)


# Global singleton
settings = Settings()
