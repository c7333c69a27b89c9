import logging
import os
from logging.handlers import TimedRotatingFileHandler

from core.config import settings

_FORMAT = logging.Formatter(
    "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    "%Y-%m-%d %H:%M:%S",
)


def get_logger(name: str = "kneebrace") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(settings.log_level.upper())

    # Handlers are attached once per logger name.
    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(_FORMAT)
        logger.addHandler(console)

        if settings.log_to_file:
            os.makedirs(settings.log_dir, exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                filename=os.path.join(settings.log_dir, f"{name}.log"),
                when="midnight",
                interval=1,
                backupCount=7,
                encoding="utf-8",
            )
            file_handler.suffix = "%Y-%m-%d"
            file_handler.setFormatter(_FORMAT)
            logger.addHandler(file_handler)

        logger.propagate = False

    return logger
