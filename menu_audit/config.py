# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file
#   and hand a typed, immutable config object to the report generator.
#
# CLASSES:
# --------
# - MongoConfig (dataclass)
#     uri: str | None       (no default, required at connect time)
#     database: str         (default "maraksh")
#
# - AuditConfig (dataclass)
#     mongo: MongoConfig
#     collection: str       (default "menuitems")
#     sample_limit: int     (default 5)
#
# FUNCTION:
# ---------
# - load_config(env_path=None) -> AuditConfig
#     Load .env using python-dotenv (explicit path, or the nearest .env
#     found from the working directory), construct AuditConfig.
#     Builds a fresh object on every call; callers pass it along.
#
# ENVIRONMENT:
# ------------
#   MONGODB_URI, DB_NAME, MENU_COLLECTION, SAMPLE_LIMIT
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from menu_audit.storage.errors import ConfigError


DEFAULT_DATABASE = "maraksh"
DEFAULT_COLLECTION = "menuitems"
DEFAULT_SAMPLE_LIMIT = 5


@dataclass(frozen=True)
class MongoConfig:
    """MongoDB connection configuration."""
    uri: Optional[str] = None
    database: str = DEFAULT_DATABASE

    def require_uri(self) -> str:
        """Return the connection string or fail with a clear message."""
        if not self.uri:
            raise ConfigError(
                "MONGODB_URI is not set. Add it to the environment or the .env file."
            )
        return self.uri


@dataclass(frozen=True)
class AuditConfig:
    """Main audit configuration."""
    mongo: MongoConfig = field(default_factory=MongoConfig)
    collection: str = DEFAULT_COLLECTION
    sample_limit: int = DEFAULT_SAMPLE_LIMIT


def _parse_sample_limit(raw: Optional[str]) -> int:
    if raw is None or raw.strip() == "":
        return DEFAULT_SAMPLE_LIMIT
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"SAMPLE_LIMIT must be an integer, got {raw!r}")
    if value < 0:
        raise ConfigError(f"SAMPLE_LIMIT must not be negative, got {value}")
    return value


def load_config(env_path: Optional[Path] = None) -> AuditConfig:
    """
    Load configuration from environment variables / .env file.

    Variables already present in the environment win over the .env file.

    Args:
        env_path: Optional path to a .env file. Defaults to the nearest .env
            found walking up from the current working directory.

    Returns:
        AuditConfig: Audit configuration
    """
    if env_path is None:
        env_path = find_dotenv(usecwd=True)
    load_dotenv(dotenv_path=env_path)

    mongo_config = MongoConfig(
        uri=os.getenv("MONGODB_URI") or None,
        database=os.getenv("DB_NAME") or DEFAULT_DATABASE
    )

    return AuditConfig(
        mongo=mongo_config,
        collection=os.getenv("MENU_COLLECTION") or DEFAULT_COLLECTION,
        sample_limit=_parse_sample_limit(os.getenv("SAMPLE_LIMIT"))
    )
