import logging
import os
import sys
from pathlib import Path

LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s:%(lineno)d  %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int | str = LOG_LEVEL,
    log_file: str | Path | None = None,
) -> None:
    """
    Configures logging for the ``iterpack`` loggers. Under pytest the root
    logger already has handlers, so only a file handler is added.
    """
    if isinstance(level, str):
        level = level.upper()

    logging.getLogger("iterpack").setLevel(level)

    root = logging.getLogger()

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # Skip duplicates on repeated CLI invocations in one process
        if not any(
            isinstance(h, logging.FileHandler)
            and h.baseFilename == os.path.abspath(log_path)
            for h in root.handlers
        ):
            file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            root.addHandler(file_handler)

    if not root.handlers:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            datefmt=DATE_FORMAT,
            handlers=[logging.StreamHandler(sys.stderr)],
        )
