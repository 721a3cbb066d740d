"""
Простой загрузчик/сохранитель конфигурации culling‑а в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from cullkit.utils.logger import logger, set_level

DEFAULT_CONFIG = {
    "log_level": "INFO",
    "culling": {
        "intersect_near": True,
        "intersect_far": True,
        "sphere_prepass": True,
        "workers": 0,
        "chunk_size": 256,
    },
    "octree": {
        "bounds": [[-50.0, -50.0, -50.0], [50.0, 50.0, 50.0]],
        "max_depth": 6,
        "max_objects": 8,
    },
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "config.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                if not isinstance(self.data, dict):
                    raise ValueError(f"expected a JSON object, got {type(self.data).__name__}")
                set_level(self["log_level"])
                logger.info("[Config] Loaded configuration.")
                return
            except (OSError, ValueError, TypeError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
        else:
            logger.info("[Config] No config file – creating default.")
        self.data = copy.deepcopy(DEFAULT_CONFIG)
        self.save()
        set_level(self["log_level"])

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def section(self, key) -> dict:
        """Секция, дополненная значениями по‑умолчанию."""
        merged = copy.deepcopy(DEFAULT_CONFIG.get(key, {}))
        merged.update(self.data.get(key, {}))
        return merged

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
