import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from localization.utils import t

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


def to_bool(value, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text not in FALSE_VALUES:
        logger.warning(f"Unrecognized boolean setting value: {value!r}")
    return False


class Settings(ABC):
    """Настройки плагина, которые хранит хост-платформа (только чтение)."""

    @abstractmethod
    def get(self, name: str) -> Optional[str]: ...

    def get_bool(self, name: str, default: bool = False) -> bool:
        return to_bool(self.get(name), default)


class EnvSettings(Settings):
    """
    Настройки из переменных окружения: имя "nocookie" читается
    из RUTUBE_NOCOOKIE.
    """

    def __init__(self, prefix: str = "RUTUBE_"):
        self.prefix = prefix

    def get(self, name: str) -> Optional[str]:
        return os.getenv(f"{self.prefix}{name.upper()}")


class StaticSettings(Settings):
    def __init__(self, values: Optional[Dict[str, object]] = None):
        self.values = dict(values or {})

    def get(self, name: str) -> Optional[str]:
        value = self.values.get(name)
        if value is None or isinstance(value, str):
            return value
        return str(value).lower() if isinstance(value, bool) else str(value)


def setting_definitions(language: Optional[str] = None) -> List[Dict[str, object]]:
    """Настройки для страницы администратора хоста с локализованными подписями."""
    return [
        {
            "name": "nocookie",
            "label": t("nocookie", language=language),
            "description": t("nocookie_desc", language=language),
            "default": False,
        },
    ]
