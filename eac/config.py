# eac/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .classify import SalePolicy
from .parse_history import DEFAULT_PARSER

PARSERS = ("html5lib", "html.parser", "lxml")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    sale_policy: SalePolicy = SalePolicy.FAN_OUT
    html_parser: str = DEFAULT_PARSER


def load_settings() -> Settings:
    """
    Read settings from the environment (call dotenv.load_dotenv() first to
    pick up a local .env). Raises ValueError on a bad value.
    """
    level = (os.environ.get("LOG_LEVEL") or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"LOG_LEVEL: unknown level {level!r}")

    try:
        policy = SalePolicy.parse((os.environ.get("EAC_SALE_POLICY") or SalePolicy.FAN_OUT.value).strip().lower())
    except ValueError as e:
        raise ValueError(f"EAC_SALE_POLICY: {e}") from None

    parser = (os.environ.get("EAC_HTML_PARSER") or DEFAULT_PARSER).strip()
    if parser not in PARSERS:
        raise ValueError(f"EAC_HTML_PARSER: unknown parser {parser!r} (expected one of: {', '.join(PARSERS)})")

    return Settings(log_level=level, sale_policy=policy, html_parser=parser)
