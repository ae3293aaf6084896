import logging
import sys
from typing import Optional
from config import LogConfig

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StructuredLogger:
    """Centralized logging for the theory modules and the CLI."""

    _loggers = {}
    _config = LogConfig()

    @classmethod
    def setup_logging(cls, config: Optional[LogConfig] = None) -> None:
        """
        Configure the root logger once for the whole process.

        Calling it again replaces the handlers it installed before.

        Raises:
            ValueError: unknown level name or console stream
        """
        if config:
            cls._config = config

        level = cls._config.level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {cls._config.level}")
        if cls._config.console_stream not in ("stdout", "stderr"):
            raise ValueError(f"Unknown console stream: {cls._config.console_stream}")

        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        formatter = logging.Formatter(cls._config.format)

        if cls._config.enable_console:
            console_handler = logging.StreamHandler(getattr(sys, cls._config.console_stream))
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if cls._config.enable_file:
            file_handler = logging.FileHandler(cls._config.file_path)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)
        return cls._loggers[name]
