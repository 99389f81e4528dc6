from __future__ import annotations

from .schema import ParseConfig


def default_config() -> ParseConfig:
    return ParseConfig()
