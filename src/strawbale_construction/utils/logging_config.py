# File: src/strawbale_construction/utils/logging_config.py
"""
Logging configuration for the strawbale construction engine.

Provides a logging setup with a custom TRACE level below DEBUG, used for
span-by-span output of the segmentation and packing algorithms. Supports file
and console output with different formats and levels.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional


class StrawbaleLogger:
    """
    Configures logging for the construction engine.

    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - Custom TRACE level for individual straw spans, bales and posts
    - File and console output with different formats and levels
    """

    TRACE_LEVEL = 5
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    @staticmethod
    def _add_trace_method():
        """Add the TRACE method to the Logger class if not already present."""
        if not hasattr(logging.Logger, 'trace'):
            def trace(self, message, *args, **kwargs):
                """Log a message with level TRACE."""
                if self.isEnabledFor(StrawbaleLogger.TRACE_LEVEL):
                    self._log(StrawbaleLogger.TRACE_LEVEL, message, args, **kwargs)
            logging.Logger.trace = trace

    @staticmethod
    def configure(
        debug_mode: bool = False,
        log_dir: str = "logs",
        console_only: bool = False,
    ) -> Optional[str]:
        """
        Configure the logging system for the entire engine.

        Args:
            debug_mode: If True, sets DEBUG level for all loggers
            log_dir: Directory to store log files
            console_only: If True, skip the file handler (e.g. when embedded in
                another application that owns the log files)

        Returns:
            Path to the created log file, or None when console_only is set
        """
        StrawbaleLogger._add_trace_method()

        level = logging.DEBUG if debug_mode else logging.INFO
        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        if root_logger.handlers:
            root_logger.handlers.clear()

        log_file = None
        if not console_only:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"strawbale_construction_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s: %(message)s'))
        console_handler.setLevel(logging.INFO)
        root_logger.addHandler(console_handler)

        return log_file

    @staticmethod
    def get_logger(name: str, level: Optional[int] = None):
        """
        Get a logger for a specific module.

        Args:
            name: Logger name, typically __name__
            level: Optional specific level for this logger

        Returns:
            A logger with the trace() method available
        """
        StrawbaleLogger._add_trace_method()
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger


def get_logger(name: str, level: Optional[int] = None):
    """
    Get a logger for a specific module.

    Convenience function that delegates to StrawbaleLogger.get_logger.
    """
    return StrawbaleLogger.get_logger(name, level)
