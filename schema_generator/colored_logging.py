"""
Colored console logging for the schema generator.

Mutation, merge and rendering progress is logged through the helpers at the
bottom of this module; ``setup_colored_logging`` installs a formatter that
colors those messages by kind.
"""

import logging
import sys
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """
    Logging formatter adding ANSI color codes.

    Warnings and errors keep their level color. Other records are colored by
    the marker the helpers put in front of the message.
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }

    SUCCESS = '\033[92m\033[1m'   # Bright green, bold
    PROGRESS = '\033[94m'         # Bright blue
    SECTION = '\033[1m\033[96m'   # Bold bright cyan
    RESET = '\033[0m'

    SUCCESS_MARKER = '✓'
    PROGRESS_MARKER = '→'
    SECTION_MARKER = '='

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True):
        """
        Args:
            fmt: Log format string (uses default if None)
            use_colors: Whether to use colors; always off when stderr is not a TTY
        """
        super().__init__(fmt or "%(levelname)s: %(message)s")
        self.use_colors = use_colors and hasattr(sys.stderr, 'isatty') and sys.stderr.isatty()

    def color_for(self, record: logging.LogRecord) -> Optional[str]:
        """ANSI color of a record, or None to leave it plain."""
        if record.levelno >= logging.WARNING:
            return self.COLORS.get(record.levelname)

        message = record.getMessage().strip()
        if message.startswith(self.SUCCESS_MARKER):
            return self.SUCCESS
        if message.startswith(self.PROGRESS_MARKER):
            return self.PROGRESS
        if message.startswith(self.SECTION_MARKER) or message.isupper():
            return self.SECTION
        if record.levelno == logging.DEBUG:
            return self.COLORS['DEBUG']
        return None

    def format(self, record: logging.LogRecord) -> str:
        formatted_message = super().format(record)
        color = self.color_for(record) if self.use_colors else None
        return f"{color}{formatted_message}{self.RESET}" if color else formatted_message


def setup_colored_logging(level: int = logging.INFO, use_colors: bool = True) -> None:
    """
    Set up colored logging on the root logger, replacing its handlers.

    Args:
        level: Logging level (default: INFO)
        use_colors: Whether to use colors (default: True)
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(use_colors=use_colors))
    console_handler.setLevel(level)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)


def log_success(logger: logging.Logger, message: str) -> None:
    logger.info(f"{ColoredFormatter.SUCCESS_MARKER} {message}")


def log_progress(logger: logging.Logger, message: str) -> None:
    logger.info(f"{ColoredFormatter.PROGRESS_MARKER} {message}")


def log_section(logger: logging.Logger, section_name: str) -> None:
    """Log a section header between two separator lines."""
    separator = ColoredFormatter.SECTION_MARKER * 60
    logger.info(separator)
    logger.info(f"  {section_name.upper()}")
    logger.info(separator)
