"""Configuration utilities for environment-based settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def load_env(dotenv_path: Optional[str] = None) -> None:
    """Load environment variables from a .env file without overriding existing values."""
    path = Path(dotenv_path or ".env")
    load_dotenv(dotenv_path=str(path), override=False)


# 58mm paper, font A
DEFAULT_WIDTH = 32
DEFAULT_CODEPAGE = 0
DEFAULT_TEXT_ENCODING = "cp437"
DEFAULT_ENCODING_ERRORS = "strict"
DEFAULT_RAWBT_PACKAGE = "ru.a402d.rawbtprinter"
DEFAULT_DISPATCH_DELAY = 0.5

_ENCODING_ERROR_POLICIES = ("strict", "replace")


@dataclass(frozen=True)
class Settings:
    """Structured configuration values for the receipt encoder."""

    width: int = DEFAULT_WIDTH
    codepage: int = DEFAULT_CODEPAGE
    text_encoding: str = DEFAULT_TEXT_ENCODING
    encoding_errors: str = DEFAULT_ENCODING_ERRORS
    rawbt_package: str = DEFAULT_RAWBT_PACKAGE
    dispatch_delay: float = DEFAULT_DISPATCH_DELAY
    tracking_base_url: str = ""

    @property
    def has_tracking(self) -> bool:
        return bool(self.tracking_base_url)


def _int_env(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        parsed = int(raw)
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        parsed = float(raw)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


@lru_cache(maxsize=1)
def get_settings(dotenv_path: Optional[str] = None) -> Settings:
    """Return cached settings, ensuring environment variables are loaded once."""
    load_env(dotenv_path)
    errors = os.getenv("RECEIPT_ENCODING_ERRORS", DEFAULT_ENCODING_ERRORS).strip().lower()
    if errors not in _ENCODING_ERROR_POLICIES:
        errors = DEFAULT_ENCODING_ERRORS
    return Settings(
        width=_int_env("RECEIPT_WIDTH", DEFAULT_WIDTH, minimum=1),
        codepage=_int_env("RECEIPT_CODEPAGE", DEFAULT_CODEPAGE),
        text_encoding=os.getenv("RECEIPT_TEXT_ENCODING", DEFAULT_TEXT_ENCODING),
        encoding_errors=errors,
        rawbt_package=os.getenv("RAWBT_PACKAGE", DEFAULT_RAWBT_PACKAGE),
        dispatch_delay=_float_env("PRINT_DISPATCH_DELAY", DEFAULT_DISPATCH_DELAY),
        tracking_base_url=os.getenv("RECEIPT_TRACKING_BASE_URL", "").rstrip("/"),
    )
