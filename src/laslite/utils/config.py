# src/laslite/utils/config.py
from __future__ import annotations

from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from laslite.config.defaults import default_config
from laslite.config.schema import ParseConfig


def load_yaml(path: Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    obj = yaml.safe_load(p.read_text(encoding="utf-8"))
    return obj if isinstance(obj, dict) else {}


def deep_get(d: Dict[str, Any], key: str, default: Any = None) -> Any:
    cur: Any = d
    for part in key.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def config_from_dict(d: Dict[str, Any], base: Optional[ParseConfig] = None) -> ParseConfig:
    """
    Overlay the `parse:` mapping of `d` on `base` (defaults if None).
    Unknown keys are ignored.
    """
    cfg = base or default_config()
    section = deep_get(d, "parse", {})
    if not isinstance(section, dict):
        return cfg
    known = {f.name for f in fields(ParseConfig)}
    kwargs = {k: v for k, v in section.items() if k in known}
    return replace(cfg, **kwargs)


def config_from_yaml(path: Optional[Path]) -> ParseConfig:
    if path is None:
        return default_config()
    return config_from_dict(load_yaml(path))
