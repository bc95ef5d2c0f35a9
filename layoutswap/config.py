"""Configuration management — JSON-based, stored in ~/.config/layoutswap/."""
import json
from pathlib import Path

DEFAULT_CONFIG = {
    "layout": "en_ua",  # registry name, see layouts.available_layouts()
    "debug_logging": False,
}

CONFIG_DIR = Path.home() / ".config" / "layoutswap"
CONFIG_FILE = CONFIG_DIR / "config.json"


class Config:
    def __init__(self):
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE, "r", encoding="utf-8") as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    self._data.update(stored)
            except (ValueError, OSError):
                pass

    def save(self):
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    @property
    def layout(self):
        return self._data["layout"]

    @layout.setter
    def layout(self, val):
        self._data["layout"] = str(val)
        self.save()

    @property
    def debug_logging(self):
        return self._data["debug_logging"] is True
