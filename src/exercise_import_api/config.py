"""Configuration settings for the exercise import API."""
import os
from typing import Literal, Optional


EnvironmentType = Literal["development", "staging", "production"]

DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_PORT = 8000


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = DEFAULT_PORT

    # Exercise import
    EXERCISE_MUSCLE_GROUPS_CONFIG_PATH: Optional[str] = None
    MAX_UPLOAD_BYTES: int = DEFAULT_MAX_UPLOAD_BYTES

    # Auth
    ADMIN_ROLE: str = "admin"

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        # Server
        self.HOST = os.getenv("HOST", "0.0.0.0")
        try:
            self.PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
        except ValueError:
            self.PORT = DEFAULT_PORT

        # Exercise import
        config_path = os.getenv("EXERCISE_MUSCLE_GROUPS_CONFIG_PATH", "").strip()
        self.EXERCISE_MUSCLE_GROUPS_CONFIG_PATH = config_path or None

        try:
            self.MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES)))
        except ValueError:
            self.MAX_UPLOAD_BYTES = DEFAULT_MAX_UPLOAD_BYTES

        # Auth
        self.ADMIN_ROLE = os.getenv("ADMIN_ROLE", "admin")


settings = Settings()
