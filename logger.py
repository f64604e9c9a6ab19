import logging

from config import LOG_FILE, LOG_LEVEL


def setup_logger() -> logging.Logger:
    """Configures and returns the service-wide logger."""
    logger = logging.getLogger("credentials")
    logger.setLevel(LOG_LEVEL)

    # Prevent adding multiple handlers if called more than once
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
        logger.addHandler(console_handler)

        if LOG_FILE:
            file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            )
            logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the service logger, e.g. ``credentials.store``."""
    setup_logger()
    return logging.getLogger(f"credentials.{name}")
