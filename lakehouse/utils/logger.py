import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"


def create_logger(
    service_name: str,
    level: Union[int, str] = logging.INFO,
    stream: Optional[object] = None,
) -> logging.Logger:
    """Return a logger for ``service_name`` with a single stream handler.

    Calling it again for the same name reuses the existing handler and only
    updates the level.
    """
    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    if not any(getattr(h, "_lakehouse_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._lakehouse_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.propagate = False

    return logger
