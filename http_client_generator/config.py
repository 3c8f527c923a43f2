"""
Конфигурация для генерации HTTP клиента
"""

import os
from typing import Optional
import toml
from dataclasses import dataclass

CONFIG_FILE_NAME = "openapi.toml"


@dataclass
class OpenApiConfig:
    """Конфигурация генератора HTTP клиента"""

    url: Optional[str] = None
    dirname: Optional[str] = None

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE_NAME
    ) -> Optional["OpenApiConfig"]:
        """Загрузка конфигурации из файла или из директории с openapi.toml"""
        if os.path.isdir(config_path):
            config_path = os.path.join(config_path, CONFIG_FILE_NAME)

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (OSError, toml.TomlDecodeError):
            return None

        return cls(
            url=config_data.get("url"),
            dirname=config_data.get("dirname"),
        )

    def save_to_file(self, config_path: str = CONFIG_FILE_NAME) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            key: value
            for key, value in (("url", self.url), ("dirname", self.dirname))
            if value is not None
        }

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "OpenApiConfig":
        """Объединение с аргументами командной строки"""
        return OpenApiConfig(
            url=args.url or self.url,
            dirname=args.dirname or self.dirname,
        )
