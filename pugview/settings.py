# pugview/settings.py
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict

DEFAULTS = {
    "scheme": "pug",
    "pug": {"options": {}, "locals": {}},
    "log_level": "INFO",
}

def _config_path() -> Path:
    override = os.getenv("PUGVIEW_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "pugview" / "config.json"

def _merge(defaults: Dict[str, Any], loaded: Dict[str, Any]) -> Dict[str, Any]:
    data = copy.deepcopy(defaults)
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(data.get(key), dict):
            data[key] = _merge(data[key], value)
        else:
            data[key] = value
    return data

def load_settings(path: Path | None = None) -> Dict[str, Any]:
    p = Path(path) if path is not None else _config_path()
    if not p.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(DEFAULTS, indent=2))
        return copy.deepcopy(DEFAULTS)
    return _merge(DEFAULTS, json.loads(p.read_text()))

def save_settings(data: Dict[str, Any], path: Path | None = None) -> None:
    p = Path(path) if path is not None else _config_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(data, indent=2))
