"""
Configuration utilities for the Lunch Tray order tool.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..ordering.state import DEFAULT_TAX_RATE


class Config:
    """Configuration manager for Lunch Tray."""

    def __init__(self, env_file: Optional[str] = None) -> None:
        """Initialize configuration.

        If an env_file path is provided, load environment variables from it
        and read settings from the environment. Without one, every setting
        keeps its default so that behaviour does not depend on the shell.
        """
        self.env_file = env_file
        self._load_environment()
        self._config = self._load_config()

    def _load_environment(self) -> None:
        """Load environment variables from explicit .env file if provided."""
        if not self.env_file:
            return
        env_path = Path(self.env_file)
        if env_path.exists():
            load_dotenv(env_path)

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        return {
            "log_level": self._get_str("LOG_LEVEL", default="INFO"),
            # Order pricing
            "tax_rate": self._get_float("TAX_RATE", default=DEFAULT_TAX_RATE),
            # Where the menu comes from: "builtin" or "mongo"
            "menu_source": self._get_str("MENU_SOURCE", default="builtin"),
            # MongoDB menu collection
            "mongo_url": self._get_str("MENU_DB_CONNECTION_URL", default=""),
            "mongo_db": self._get_str("MENU_DB_NAME", default="LUNCH_TRAY"),
            "mongo_collection": self._get_str("MENU_COLLECTION_NAME", default="MENU_ITEMS"),
        }

    def _get_str(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        if self.env_file is None:
            return default
        return os.getenv(key, default)

    def _get_float(self, key: str, default: float = 0.0) -> float:
        """Get float configuration value."""
        if self.env_file is None:
            return default
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Get configuration value using bracket notation."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if configuration key exists."""
        return key in self._config
