import logging
import os


def setup_logging() -> None:
    # Уровень из окружения, по умолчанию — ERROR
    level_name = os.getenv("LOG_LEVEL", "ERROR").upper()
    level = getattr(logging, level_name, logging.ERROR)
    if not isinstance(level, int):
        level = logging.ERROR

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )

    # Шум от шаблонизатора нам не нужен
    for noisy in ("jinja2", "markupsafe"):
        logging.getLogger(noisy).setLevel(max(level, logging.ERROR))
