import logging
from pathlib import Path

from black import FileMode, InvalidInput, format_str as black_format_str


logger = logging.getLogger(__name__)

BLACK_FORMATTER_MODE = FileMode(line_length=120)


def format_python_code_using_black(filepath: Path, code_string: str) -> str:
    """Formats the given Python code using Black."""
    try:
        formatted_code = black_format_str(code_string, mode=BLACK_FORMATTER_MODE)
        logger.debug(f"Formatted code using Black: {filepath}")
        return formatted_code
    except InvalidInput as e:
        # Usually a relation resolver body that is not valid Python
        logger.error(f"Could not format Python code using Black: {e}", exc_info=False)
        logger.warning(f"Writing unformatted Python code for {filepath} due to Black error.")
        return code_string
