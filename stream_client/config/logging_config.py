"""Configure logging for the stream client."""
import logging
import logging.handlers
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOG_FILE_PREFIX = "stream_client"


def setup_logging(
    name: Optional[str] = None,
    log_dir: Union[str, Path] = "logs",
    console_level: int = logging.INFO,
) -> logging.Logger:
    """Set up file and console logging.

    Args:
        name: Optional name for the logger. If None, configures the root logger.
        log_dir: Directory receiving the daily log file
        console_level: Level of messages echoed to the console

    Returns:
        Configured logger instance
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d")
    log_file = log_dir / f"{LOG_FILE_PREFIX}_{timestamp}.log"

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=10485760, backupCount=5  # 10MB
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)

    logger = logging.getLogger(name) if name else logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Replace handlers so repeated setup does not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger
