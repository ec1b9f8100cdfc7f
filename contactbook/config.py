"""
Runtime configuration for Contactbook.

Values come from the environment (optionally a .env file loaded through
python-dotenv) and fall back to the defaults below.

File: config.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError

PHONE_FORMATS = ("any", "e164")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    """Configuration for the contact store, logging and input validation."""

    # Storage
    db_path: Path = field(default_factory=lambda: Path("data/contacts.db"))

    # Logging
    log_dir: Path = field(default_factory=lambda: Path("logs"))
    log_level: str = "INFO"

    # Validation
    phone_format: str = "any"  # "any" keeps numbers as typed, "e164" normalizes
    default_region: str = "US"

    def __post_init__(self):
        # Ensure paths are Path objects
        if isinstance(self.db_path, str):
            self.db_path = Path(self.db_path)
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"unknown log level '{self.log_level}' (expected one of {', '.join(LOG_LEVELS)})",
                key="log_level",
            )

        self.phone_format = self.phone_format.lower()
        if self.phone_format not in PHONE_FORMATS:
            raise ConfigError(
                f"unknown phone format '{self.phone_format}' (expected one of {', '.join(PHONE_FORMATS)})",
                key="phone_format",
            )

        self.default_region = self.default_region.upper()

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "AppConfig":
        """
        Build a config from CONTACTBOOK_* environment variables.

        Args:
            dotenv: Load a .env file from the working directory first

        Returns:
            AppConfig with unset variables left at their defaults
        """
        if dotenv:
            load_dotenv()

        defaults = cls()
        return cls(
            db_path=os.getenv("CONTACTBOOK_DB_PATH", str(defaults.db_path)),
            log_dir=os.getenv("CONTACTBOOK_LOG_DIR", str(defaults.log_dir)),
            log_level=os.getenv("CONTACTBOOK_LOG_LEVEL", defaults.log_level),
            phone_format=os.getenv("CONTACTBOOK_PHONE_FORMAT", defaults.phone_format),
            default_region=os.getenv("CONTACTBOOK_DEFAULT_REGION", defaults.default_region),
        )

    def to_dict(self) -> dict:
        """Convert to dict for display in the settings drawer."""
        return {
            "db_path": str(self.db_path),
            "log_dir": str(self.log_dir),
            "log_level": self.log_level,
            "phone_format": self.phone_format,
            "default_region": self.default_region,
        }


def configure_logging(config: AppConfig) -> Path:
    """
    Send log records to a dated file, and warnings to the terminal.

    Returns:
        Path of the log file in use
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = config.log_dir / f"contactbook_{datetime.now().strftime('%Y-%m-%d')}.log"

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(asctime)s | %(levelname)-8s | %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            stream_handler,
        ],
    )
    return log_file
