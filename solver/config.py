from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional
import logging
import yaml

DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "debug_format": True,  # validate before rendering
    "report_errors": True,  # log the first violation found
    "indent": 2,  # JSON indent for CLI output
}

class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)

def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg

def load_config(path: Optional[str | Path] = None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None keyword overrides."""
    cfg = DotDict(DEFAULTS)
    if path is not None:
        cfg.update(load_yaml(path))
    merge_overrides(cfg, **overrides)
    level = str(cfg.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log_level: {cfg.log_level!r}")
    cfg.log_level = level
    return cfg
