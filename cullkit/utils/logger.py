# cullkit/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета. Горячий путь (тесты отдельных объектов) не логирует,
# сюда пишут только конфиг, проходы видимости, octree и профайлер.
# ---------------------------------------------------------------

import logging


def init_logger(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("cullkit")


logger = init_logger()


def set_level(level) -> None:
    """Принимает как int, так и строку вида "DEBUG"."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
