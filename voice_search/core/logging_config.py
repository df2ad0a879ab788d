"""
Logging setup for the voice search service.

Everything goes to a single stdout handler; chatty client libraries are held
at WARNING so request logs stay readable.
"""

import logging
import sys

QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "httpx", "httpcore", "pymongo", "motor")


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure the root logger once at startup.

    Args:
        log_level: Level name for the root and voice_search loggers
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Reloads would otherwise stack handlers
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("voice_search").setLevel(level)
    logging.info(f"Logging configured at {logging.getLevelName(level)}")
