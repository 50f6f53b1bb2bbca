"""Configuration and environment handling for clmbridge."""

import logging
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

DEFAULT_ACCOUNT_FIELDS = [
    "Id",
    "Name",
    "FirstName",
    "KeyMessages__c",
    "LastName",
    "PersonEmail",
    "Fax",
]


def _split_fields(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


class Config:
    """Central configuration object."""

    def __init__(self):
        # Load .env file if it exists
        env_path = Path(__file__).parent.parent.parent / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        # Logging
        self.log_level: str = os.getenv("CLM_LOG_LEVEL", "INFO")

        # Message used when the host reports a failure without one
        self.default_error_message: str = (
            os.getenv("CLM_DEFAULT_ERROR_MESSAGE") or "Error getting data"
        )

        # Account projection used by get_account()
        raw_fields = os.getenv("CLM_ACCOUNT_FIELDS")
        self.account_fields: List[str] = (
            _split_fields(raw_fields) if raw_fields else list(DEFAULT_ACCOUNT_FIELDS)
        )

    def configure_logging(self) -> None:
        """Apply the configured log level to the clmbridge logger hierarchy."""
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO
        logging.getLogger("clmbridge").setLevel(level)


# Global config instance
config = Config()
