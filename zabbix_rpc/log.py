import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Initialize application-wide logging.
    Safe to call multiple times (second call is a no-op).

    The library itself only emits records; scripts using it call this once.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured
        return

    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root.addHandler(console_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        # File handler with rotation
        file_handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root.addHandler(file_handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Return a module-specific logger.
    """
    return logging.getLogger(name)
