from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _strip_or_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def _parse_log_level(value: Optional[str]) -> int:
    name = (_strip_or_none(value) or "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise RuntimeError(f"Unknown LOG_LEVEL '{name}' in environment or .env file.")
    return level


def _parse_port(value: Optional[str]) -> int:
    raw = _strip_or_none(value) or "5678"
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"DEBUG_PORT must be an integer, got '{raw}'.") from exc


@dataclass(frozen=True)
class PageSettings:
    title: str
    icon: str
    layout: str = "centered"


class Settings:

    def __init__(self) -> None:
        self.page = PageSettings(
            title=_strip_or_none(os.getenv("SURVEY_PAGE_TITLE")) or "Personality Survey",
            icon=_strip_or_none(os.getenv("SURVEY_PAGE_ICON")) or "🧭",
        )
        self.log_level = _parse_log_level(os.getenv("LOG_LEVEL"))
        self.debug_attach = _strip_or_none(os.getenv("DEBUG_ATTACH")) == "1"
        self.debug_port = _parse_port(os.getenv("DEBUG_PORT"))


settings = Settings()
