"""Configuration management — JSON-based, stored in ~/.config/letterpool/."""
import json
from pathlib import Path

DEFAULT_CONFIG = {
    "dictionary_path": "words.txt",
    "builtin_language": "en",
    "debug_logging": False,
    "window_width": 720,
    "window_height": 640,
}

CONFIG_DIR = Path.home() / ".config" / "letterpool"
CONFIG_FILE = CONFIG_DIR / "config.json"


class Config:
    def __init__(self, path: Path = None):
        self._path = Path(path) if path is not None else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self):
        if self._path.exists():
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    self._data.update(stored)
            except (json.JSONDecodeError, UnicodeDecodeError, IOError):
                pass

    def save(self):
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    @property
    def dictionary_path(self):
        return self._data["dictionary_path"]

    @property
    def builtin_language(self):
        return self._data["builtin_language"]

    @property
    def debug_logging(self):
        return self._data["debug_logging"]

    @property
    def window_size(self):
        return (self.get("window_width", 720), self.get("window_height", 640))
