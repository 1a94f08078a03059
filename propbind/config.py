# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load the engine's own settings from environment
#   variables / .env file. Provides a typed config object
#   to the converter, the binder and the CLI.
#
# CLASSES:
# --------
# - BinderConfig (dataclass)
#     separator: str         (default ",")       PROPBIND_SEPARATOR
#     strict_elements: bool  (default True)      PROPBIND_STRICT_ELEMENTS
#     log_level: str         (default "WARNING") PROPBIND_LOG_LEVEL
#
# FUNCTIONS:
# ----------
# - get_config() -> BinderConfig
#     Load .env using python-dotenv, construct BinderConfig.
#     Returns the same singleton on repeated calls.
#
# - configure_logging(config) -> None
#     Apply log_level to the "propbind" logger.
#
# USAGE:
# ------
#   from propbind.config import get_config
#   config = get_config()
#   print(config.separator)
#
# ==============================================

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class BinderConfig:
    """Settings of the binding engine."""
    separator: str = ","
    strict_elements: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        if not self.separator:
            raise ValueError("separator must not be empty")


# Singleton instance
_config_instance: Optional[BinderConfig] = None


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def get_config() -> BinderConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        BinderConfig: Engine configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # .env in the working directory, then the project root
    load_dotenv()
    load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

    _config_instance = BinderConfig(
        separator=os.getenv("PROPBIND_SEPARATOR", ","),
        strict_elements=_env_flag("PROPBIND_STRICT_ELEMENTS", "true"),
        log_level=os.getenv("PROPBIND_LOG_LEVEL", "WARNING").upper(),
    )

    return _config_instance


def configure_logging(config: Optional[BinderConfig] = None) -> None:
    """
    Configure the package logger from the config's log level.

    Args:
        config: Configuration to use. Loads the singleton if omitted.
    """
    config = config or get_config()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("propbind").setLevel(config.log_level)
