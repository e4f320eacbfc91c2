import logging

from black import (
    FileMode,
    format_str as black_format_str,
    NothingChanged as BlackNothingChanged,
)

from .constants import GenerationOptions


logger = logging.getLogger(__name__)

BLACK_FORMATTER_MODE = FileMode(line_length=GenerationOptions.DEFAULT_LINE_LENGTH)


def format_python_code_using_black(module_name: str, code_string: str) -> str:
    """Formats the given Python code using Black."""
    try:
        formatted_code = black_format_str(code_string, mode=BLACK_FORMATTER_MODE)
        logger.debug(f"Formatted code using Black: {module_name}")
        return formatted_code
    except BlackNothingChanged:
        logger.debug(f"Black formatter did not change the code: {module_name}")
        return code_string
    except Exception as e:
        # Black rejects code it cannot parse; the caller still gets the source
        logger.error(
            f"Could not format Python code using Black: {e}", exc_info=False
        )
        logger.warning("Returning unformatted Python code due to Black error.")
        return code_string
