import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from ..config import LOG_DIR

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggingConfig:
    """Logging set-up shared by the API server and the admin scripts."""

    def __init__(self, logs_dir: str = LOG_DIR):
        self.logs_dir = Path(logs_dir)
        self._configured = False

    def setup_logging(
        self,
        log_level: str = "INFO",
        console_level: Optional[str] = None,
        file_level: Optional[str] = None,
        max_file_size: int = 10 * 1024 * 1024,  # 10 MB
        backup_count: int = 5,
        log_format: Optional[str] = None,
        log_to_file: bool = True,
    ) -> None:
        """
        Configure the root logger once per process.

        Args:
            log_level: Default level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console_level: Level for console output, if different from log_level
            file_level: Level for the rotating log file, if different from log_level
            max_file_size: Size in bytes at which the log file is rotated
            backup_count: Number of rotated files to keep
            log_format: Custom format string
            log_to_file: Whether to attach the rotating file handler at all
        """
        if self._configured:
            return

        root_level = LEVELS.get(log_level.upper(), logging.INFO)
        console_log_level = LEVELS.get((console_level or log_level).upper(), root_level)
        file_log_level = LEVELS.get((file_level or log_level).upper(), root_level)
        formatter = logging.Formatter(log_format or DEFAULT_FORMAT)

        root_logger = logging.getLogger()
        root_logger.setLevel(min(console_log_level, file_log_level))
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if log_to_file:
            self.logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                self.logs_dir / "school-backend.log",
                maxBytes=max_file_size,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(file_log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        self._configured = True

        logger = logging.getLogger(__name__)
        logger.info(
            f"Logging configured - Console: {console_level or log_level}, File: {file_level or log_level}"
        )
        if log_to_file:
            logger.info(f"Log files will be stored in: {self.logs_dir.absolute()}")


_logging_config = LoggingConfig()


def setup_logging(**kwargs) -> None:
    """Convenience function to set up logging."""
    _logging_config.setup_logging(**kwargs)


def configure_from_env() -> None:
    """Configure logging from environment variables."""
    setup_logging(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        console_level=os.getenv("CONSOLE_LOG_LEVEL"),
        file_level=os.getenv("FILE_LOG_LEVEL"),
        log_to_file=os.getenv("LOG_TO_FILE", "true").lower() != "false",
    )
