"""
Utilities Module

Configuration and logging helpers shared by the core and the CLI.
"""

from .config import Config
from .logging import get_logger, setup_logging

__all__ = ["Config", "get_logger", "setup_logging"]
