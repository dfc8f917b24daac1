"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from game_maths.utils.logger import logger

DEFAULT_CONFIG = {
    "logging": {
        "level": "DEBUG",
        "file": "logs/game-maths.log",
        "console": True,
    },
    "display": {"precision": None},
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "game_maths.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть загруженный экземпляр (нужно тестам)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info("[Config] Loaded configuration.")
            except (OSError, json.JSONDecodeError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        if key in self.data:
            return self.data[key]
        return copy.deepcopy(DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
