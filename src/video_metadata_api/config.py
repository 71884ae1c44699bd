"""Configuration settings for the video metadata API."""
import os
from typing import List


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
)


class Settings:
    """Application settings."""

    # Logging
    LOG_LEVEL: str = "INFO"

    # Outbound HTTP
    REQUEST_TIMEOUT: float = 10.0
    USER_AGENT: str = DEFAULT_USER_AGENT

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    def __init__(self):
        # Logging
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_LEVEL = level if level in LOG_LEVELS else "INFO"

        # Outbound HTTP
        try:
            self.REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
        except ValueError:
            self.REQUEST_TIMEOUT = 10.0
        if self.REQUEST_TIMEOUT <= 0:
            self.REQUEST_TIMEOUT = 10.0
        self.USER_AGENT = os.getenv("USER_AGENT") or DEFAULT_USER_AGENT

        # CORS
        origins = os.getenv("CORS_ALLOW_ORIGINS", "*")
        self.CORS_ALLOW_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()] or ["*"]


settings = Settings()
