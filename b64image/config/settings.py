"""
Пользовательские настройки вставки и настройка логирования.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from platformdirs import user_data_dir

APP_NAME = "insert-base64-image"
SETTINGS_FILE = "settings.json"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Settings:
    """Два переключателя, влияющих на результат вставки."""
    strip_linebreaks: bool = True  # убрать переводы строк из base64
    wrap_by_context: bool = True   # оборачивать результат по режиму кода

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Создаёт Settings из словаря.

        Неизвестные ключи и значения, не являющиеся JSON-булевыми, игнорируются:
        для них остаётся значение по умолчанию.
        """
        valid_keys = {f.name for f in fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys and isinstance(v, bool)}
        return cls(**filtered_data)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def default_settings_dir() -> Path:
    return Path(user_data_dir(APP_NAME)).expanduser().resolve()


# --- Persistence functions ---

def load_settings(settings_dir: Path) -> Settings:
    """Читает настройки из JSON-файла; при отсутствии или порче файла возвращает значения по умолчанию."""
    path = settings_dir / SETTINGS_FILE
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Settings.from_dict(data)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError, TypeError, AttributeError):
        logging.getLogger(__name__).warning("Повреждён файл настроек %s, используются значения по умолчанию", path)
        return Settings()


def save_settings(settings_dir: Path, settings: Settings) -> Path:
    """Сохраняет настройки в JSON-файл, создавая каталог при необходимости."""
    settings_dir.mkdir(parents=True, exist_ok=True)
    path = settings_dir / SETTINGS_FILE
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    return path


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Настраивает логгер приложения `b64image`."""
    logger = logging.getLogger("b64image")
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.INFO,
            format=LOG_FORMAT,
        )
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
