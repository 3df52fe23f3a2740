import os
from typing import Optional

from dotenv import load_dotenv

from labelcheck import __version__

load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    PROJECT_NAME: str = "LabelCheck API"
    VERSION: str = __version__

    def __init__(
        self,
        gemini_api_key: Optional[str] = None,
        gemini_model: Optional[str] = None,
        gemini_api_base: Optional[str] = None,
        gemini_timeout: Optional[float] = None,
        log_level: Optional[str] = None,
    ):
        # Security
        self.GEMINI_API_KEY: Optional[str] = gemini_api_key or os.environ.get("GEMINI_API_KEY")

        # Models
        self.GEMINI_MODEL: str = gemini_model or os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
        self.GEMINI_API_BASE: str = (
            gemini_api_base
            or os.environ.get("GEMINI_API_BASE", "https://generativelanguage.googleapis.com/v1beta")
        ).rstrip("/")

        # No timeout unless the operator sets one
        self.GEMINI_TIMEOUT: Optional[float] = (
            gemini_timeout if gemini_timeout is not None
            else _optional_float(os.environ.get("GEMINI_TIMEOUT"))
        )

        # Environment
        self.LOG_LEVEL: str = (log_level or os.environ.get("LOG_LEVEL", "INFO")).upper()
        self.ENV: str = os.environ.get("ENV", "development")
        self.DEBUG: bool = self.ENV == "development"

    @property
    def generate_url(self) -> str:
        return f"{self.GEMINI_API_BASE}/models/{self.GEMINI_MODEL}:generateContent"


settings = Settings()


def get_settings() -> Settings:
    return settings
