"""
Logging Configuration for number-wordify

Features:
- Colored console output
- Optional rotating file handler
- Configurable log levels
- Old logs cleanup

The library itself never installs handlers; only the command-line
entry point calls LoggingConfig.setup_logging().
"""
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from datetime import datetime, timedelta
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',  # Cyan
        'INFO': '\033[32m',  # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',  # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        # Work on a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        return super().format(record)


class LoggingConfig:
    """Centralized logging configuration"""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
    DEFAULT_BACKUP_COUNT = 5

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_dir: Optional[str] = None,
            enable_console: bool = True,
            enable_colors: bool = True,
    ) -> None:
        """Configure the root logger; a file handler is added only when log_dir is given."""
        log_level = log_level or os.getenv("LOG_LEVEL", LoggingConfig.DEFAULT_LOG_LEVEL)
        level = getattr(logging, str(log_level).upper(), logging.INFO)

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        detailed_format = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console goes to stderr so stdout carries only the converted words
        if enable_console and sys.stderr is not None:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)

            is_tty = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

            if enable_colors and is_tty:
                console_handler.setFormatter(ColoredFormatter(
                    '%(asctime)s - %(levelname)s - %(message)s',
                    datefmt='%H:%M:%S'
                ))
            else:
                console_handler.setFormatter(detailed_format)

            root_logger.addHandler(console_handler)

        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(exist_ok=True, parents=True)

            log_file = log_path / f"log_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=LoggingConfig.DEFAULT_MAX_BYTES,
                backupCount=LoggingConfig.DEFAULT_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(detailed_format)
            root_logger.addHandler(file_handler)

        root_logger.debug("Logging initialized.")

    @staticmethod
    def cleanup_old_logs(log_dir: str, days_to_keep: int = 30) -> int:
        """Clean up old log files"""
        log_path = Path(log_dir)

        if not log_path.exists():
            return 0

        cutoff_date = datetime.now() - timedelta(days=days_to_keep)
        deleted_count = 0

        for log_file in log_path.glob("*.log*"):
            try:
                file_time = datetime.fromtimestamp(log_file.stat().st_mtime)
                if file_time < cutoff_date:
                    log_file.unlink()
                    deleted_count += 1
            except OSError as e:
                logging.getLogger(__name__).warning(f"Could not remove {log_file}: {e}")

        return deleted_count
