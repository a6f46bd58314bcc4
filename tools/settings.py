"""
Settings — environment-driven configuration and logging setup.

Values come from the process environment, optionally seeded from a .env
file. Nothing here is read at import time; hosts call load_settings()
once at startup and pass the result down.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from models.profile import DEFAULT_AVATAR_EMOJI

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for a Quest Center host."""

    gemini_api_key: Optional[str] = None
    boss_quest_model: str = "gemini-2.0-flash"
    log_level: str = "INFO"
    log_dir: str = "logs"
    default_avatar_emoji: str = DEFAULT_AVATAR_EMOJI

    @property
    def boss_quests_enabled(self) -> bool:
        """Generation needs an API key; without one the boss tab stays pending."""
        return bool(self.gemini_api_key)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings from the environment (and a .env file if present)."""
    load_dotenv(env_file)
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        boss_quest_model=os.getenv("BOSS_QUEST_MODEL", "gemini-2.0-flash"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_dir=os.getenv("LOG_DIR", "logs"),
        default_avatar_emoji=os.getenv("DEFAULT_AVATAR_EMOJI", DEFAULT_AVATAR_EMOJI),
    )


def configure_logging(settings: Settings) -> None:
    """Log to stderr and to <log_dir>/quest_center.log.

    Replaces any handlers already on the root logger.
    """
    if not os.path.exists(settings.log_dir):
        os.makedirs(settings.log_dir)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(os.path.join(settings.log_dir, "quest_center.log"), encoding="utf-8"),
            logging.StreamHandler(),
        ],
        force=True,
    )
