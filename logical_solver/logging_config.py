import logging
import sys


def setup_logging(level: str = "WARNING", stream=None) -> logging.Handler:
    """
    Set up console logging for the front end.
    Returns the handler that was installed.
    """
    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(level)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[console_handler],
    )

    return console_handler
