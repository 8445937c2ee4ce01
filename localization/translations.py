TRANSLATIONS = {
    "ru": {
        "pluginname": "RuTube",
        "pluginname_help": "Встроенный проигрыватель RuTube для ссылок вида rutube.ru/video/…",
        "nocookie": "Режим без cookie",
        "nocookie_desc": "Встраивать видео с домена, который не ставит cookie до начала просмотра.",
    },
    "en": {
        "pluginname": "RuTube",
        "pluginname_help": "Embedded RuTube player for rutube.ru/video/… links",
        "nocookie": "No-cookie mode",
        "nocookie_desc": "Embed videos from a host that sets no cookies before playback starts.",
    },
}

# Языки по умолчанию для разных кодов
DEFAULT_LANGUAGES = {
    "ru": "ru",  # Русский
    "uk": "ru",  # Украинский -> Русский
    "be": "ru",  # Белорусский -> Русский
    "kk": "ru",  # Казахский -> Русский
    "ky": "ru",  # Киргизский -> Русский
    "uz": "ru",  # Узбекский -> Русский
    "tg": "ru",  # Таджикский -> Русский
    "hy": "ru",  # Армянский -> Русский
    "az": "ru",  # Азербайджанский -> Русский
    "en": "en",  # Английский
    "de": "en",  # Немецкий -> Английский
    "fr": "en",  # Французский -> Английский
    "es": "en",  # Испанский -> Английский
}


def get_user_language(user_language_code: str = None) -> str:
    if not user_language_code:
        return "en"

    lang_code = user_language_code.lower().split("-")[0].split("_")[0]

    return DEFAULT_LANGUAGES.get(lang_code, "en")


def get_text(key: str, language: str = "en", **kwargs) -> str:
    if language not in TRANSLATIONS:
        language = "en"

    text = TRANSLATIONS[language].get(key, TRANSLATIONS["en"].get(key, key))

    try:
        return text.format(**kwargs)
    except (KeyError, ValueError):
        return text
