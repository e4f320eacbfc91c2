"""
Tests for the colored logging helpers
"""

import logging
from unittest import TestCase
from unittest.mock import patch

from schema_generator.colored_logging import (
    ColoredFormatter,
    log_progress,
    log_section,
    log_success,
    setup_colored_logging,
)


def _record(message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("schema_generator", level, __file__, 1, message, None, None)


class TestColoredFormatter(TestCase):
    """Test cases for ColoredFormatter"""

    def setUp(self):
        with patch("schema_generator.colored_logging.sys") as mocked_sys:
            mocked_sys.stderr.isatty.return_value = True
            self.formatter = ColoredFormatter()

    def test_colors_follow_message_markers(self):
        assert self.formatter.color_for(_record("✓ Generated 3 class module(s)")) == ColoredFormatter.SUCCESS
        assert self.formatter.color_for(_record("→ Merging class Book")) == ColoredFormatter.PROGRESS
        assert self.formatter.color_for(_record("=" * 60)) == ColoredFormatter.SECTION
        assert self.formatter.color_for(_record("  CODE GENERATION")) == ColoredFormatter.SECTION
        assert self.formatter.color_for(_record("plain message")) is None

    def test_warnings_keep_level_color(self):
        record = _record("✓ looks like success", logging.WARNING)

        assert self.formatter.color_for(record) == ColoredFormatter.COLORS['WARNING']
        assert self.formatter.format(record) == "\033[33mWARNING: ✓ looks like success\033[0m"

    def test_colors_disabled_without_tty(self):
        with patch("schema_generator.colored_logging.sys") as mocked_sys:
            mocked_sys.stderr.isatty.return_value = False
            formatter = ColoredFormatter()

        assert formatter.format(_record("→ Merging class Book")) == "INFO: → Merging class Book"


class TestLoggingHelpers(TestCase):
    """Test cases for the message helpers and setup"""

    def test_helpers_prefix_markers(self):
        logger = logging.getLogger("schema_generator.tests")

        with self.assertLogs(logger, level="INFO") as captured:
            log_progress(logger, "Merging class Book")
            log_success(logger, "Generated 1 class module(s) successfully")
            log_section(logger, "Code Generation")

        assert [record.getMessage() for record in captured.records] == [
            "→ Merging class Book",
            "✓ Generated 1 class module(s) successfully",
            "=" * 60,
            "  CODE GENERATION",
            "=" * 60,
        ]

    def test_setup_replaces_root_handlers(self):
        root_logger = logging.getLogger()
        saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
        self.addCleanup(setattr, root_logger, "handlers", saved_handlers)
        self.addCleanup(root_logger.setLevel, saved_level)

        setup_colored_logging(level=logging.DEBUG, use_colors=False)

        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, ColoredFormatter)
        assert root_logger.level == logging.DEBUG
