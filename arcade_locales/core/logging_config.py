"""Logging configuration for the locale catalog and its scripts."""

import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime

# Log levels for different components
LOGGING_CONFIG = {
    "arcade_locales": logging.INFO,
    "arcade_locales.core": logging.INFO,
    "arcade_locales.games": logging.INFO,

    # Reduce noise from libraries
    "pydantic": logging.WARNING,
    "dotenv": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """Console formatter: colours warnings and errors, drops the package prefix."""

    COLORS = {
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'
    PREFIX = "arcade_locales."

    def format(self, record: logging.LogRecord) -> str:
        levelname, name = record.levelname, record.name
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        if name.startswith(self.PREFIX):
            record.name = name[len(self.PREFIX):]
        try:
            return super().format(record)
        finally:
            # File handlers format the same record afterwards
            record.levelname, record.name = levelname, name


def setup_logging(log_file: bool = False, debug: bool = False, log_dir: Path | None = None) -> None:
    """Configure root logging: colored console, optional rotating file."""

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_formatter = ColoredFormatter(
        "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = log_dir or Path("logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        log_filename = log_dir / f"arcade_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    for logger_name, level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(level)
    if debug:
        # Component levels would otherwise mask debug output
        for logger_name in ("arcade_locales", "arcade_locales.core", "arcade_locales.games"):
            logging.getLogger(logger_name).setLevel(logging.DEBUG)

    logging.getLogger(__name__).info(
        "Logging configured (console=%s, file=%s)",
        "DEBUG" if debug else "INFO",
        "ENABLED" if log_file else "DISABLED",
    )
