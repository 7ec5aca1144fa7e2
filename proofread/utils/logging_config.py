"""
Logging Configuration

Centralized logging setup for proofread:
- Configurable logging levels (debug, info, warning, error)
- Console output on stderr, so reports on stdout stay clean
- Optional log file output with rotation
- Debug helpers for configuration details and operation timing
"""

import logging
import logging.handlers
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LoggingConfig:
    """
    Centralized logging configuration for proofread.

    The first call to configure_logging() installs the handlers; later calls
    only change the level.
    """

    def __init__(self):
        self._configured = False
        self._log_file_handler: Optional[logging.Handler] = None
        self._console_handler: Optional[logging.Handler] = None

    def configure_logging(
        self,
        level: str = "warning",
        log_file: Optional[str] = None,
        include_timestamps: bool = True,
        max_log_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ) -> None:
        """
        Configure logging for the application.

        Args:
            level: Logging level (debug, info, warning, error)
            log_file: Optional log file path
            include_timestamps: Whether to include timestamps in console messages
            max_log_file_size: Maximum log file size before rotation
            backup_count: Number of backup log files to keep
        """
        log_level = self._get_log_level(level)
        root_logger = logging.getLogger()

        if self._configured:
            root_logger.setLevel(log_level)
            if self._console_handler is not None:
                self._console_handler.setLevel(log_level)
            return

        root_logger.setLevel(log_level)

        self._console_handler = logging.StreamHandler(sys.stderr)
        self._console_handler.setLevel(log_level)
        self._console_handler.setFormatter(
            self._create_console_formatter(include_timestamps, level.lower() == "debug")
        )
        root_logger.addHandler(self._console_handler)

        if log_file:
            self._configure_file_logging(log_file, log_level, max_log_file_size, backup_count)

        self._configured = True

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={level}, file={log_file}")

    def reset(self) -> None:
        """Remove the handlers installed by configure_logging()."""
        root_logger = logging.getLogger()
        for handler in (self._console_handler, self._log_file_handler):
            if handler is not None:
                root_logger.removeHandler(handler)
                handler.close()
        self._console_handler = None
        self._log_file_handler = None
        self._configured = False

    def _get_log_level(self, level_str: str) -> int:
        """Convert string log level to logging constant."""
        level_map = {
            LogLevel.DEBUG.value: logging.DEBUG,
            LogLevel.INFO.value: logging.INFO,
            LogLevel.WARNING.value: logging.WARNING,
            LogLevel.ERROR.value: logging.ERROR,
        }
        return level_map.get(level_str.lower(), logging.WARNING)

    def _create_console_formatter(self, include_timestamps: bool, debug_mode: bool) -> logging.Formatter:
        """Create formatter for console output."""
        parts = []

        if include_timestamps:
            parts.append("%(asctime)s")

        if debug_mode:
            parts.append("%(name)s")

        parts.extend(["%(levelname)s", "%(message)s"])

        return logging.Formatter(
            " - ".join(parts),
            datefmt="%H:%M:%S" if not debug_mode else "%Y-%m-%d %H:%M:%S"
        )

    def _configure_file_logging(
        self,
        log_file: str,
        log_level: int,
        max_size: int,
        backup_count: int
    ) -> None:
        """Configure file logging with rotation."""
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)

            self._log_file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_size,
                backupCount=backup_count,
                encoding="utf-8"
            )
            self._log_file_handler.setLevel(log_level)
            self._log_file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logging.getLogger().addHandler(self._log_file_handler)

        except OSError as e:
            # Log file setup failed, continue with console only
            logger = logging.getLogger(__name__)
            logger.warning(f"Failed to setup log file {log_file}: {e}")

    def log_configuration_details(self, config: Dict[str, Any]) -> None:
        """Log configuration details at debug level."""
        logger = logging.getLogger(__name__)

        if not logger.isEnabledFor(logging.DEBUG):
            return

        logger.debug("=== Configuration Details ===")
        for key, value in config.items():
            logger.debug(f"  {key}: {value}")
        logger.debug("=== End Configuration ===")

    def log_operation_timing(self, operation: str, duration: float) -> None:
        """Log operation timing information."""
        logger = logging.getLogger(__name__)

        if duration < 1.0:
            logger.debug(f"{operation} completed in {duration*1000:.0f}ms")
        else:
            logger.info(f"{operation} completed in {duration:.1f}s")


# Global logging configuration instance
logging_config = LoggingConfig()


def configure_logging(level: str = "warning", log_file: Optional[str] = None) -> None:
    """
    Convenience function to configure logging.

    Args:
        level: Logging level (debug, info, warning, error)
        log_file: Optional log file path
    """
    logging_config.configure_logging(level=level, log_file=log_file)
