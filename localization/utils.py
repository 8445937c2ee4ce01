from typing import Optional

from .translations import get_text, get_user_language


def t(key: str, language: Optional[str] = None, **kwargs) -> str:
    """Строка плагина; language — код локали хоста, например "ru_RU"."""
    return get_text(key, get_user_language(language), **kwargs)
