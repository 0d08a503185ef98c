# genpass/config.py
"""
Persisted CLI defaults for genpass.
Settings saved as JSON in %APPDATA%/genpass/config.json (Windows) or ~/.genpass/config.json (fallback)
"""

import os
import json
import logging
from typing import Dict, Any

logger = logging.getLogger("genpass.config")

DEFAULTS: Dict[str, Any] = {
    "length": 12,
    "include": "l,u,n,s",
    "exclude": "",
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "genpass")
    return os.path.join(os.path.expanduser("~"), ".genpass")

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults, drop unknown keys and badly typed values
    out = DEFAULTS.copy()
    for key, value in data.items():
        if key not in DEFAULTS:
            continue
        if not _valid(key, value):
            logger.warning("ignoring config %s: bad value %r for %r", p, value, key)
            continue
        out[key] = value
    return out

def _valid(key: str, value: Any) -> bool:
    expected = type(DEFAULTS[key])
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, expected):
        return False
    if key == "length":
        return value >= 0
    return True

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    os.makedirs(os.path.dirname(p), exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    logger.debug("saved defaults to %s", p)
