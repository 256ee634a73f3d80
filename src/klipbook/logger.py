"""Logging setup with rich console output.

Modules log through the standard library:

    log = logging.getLogger(__name__)

and the CLI calls setup_logging() once before running a command.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Logs go to stderr so command output on stdout stays clean
console = Console(stderr=True)


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger with a rich handler.

    Args:
        level: Default logging level. The LOG_LEVEL environment variable
               overrides it.
    """
    requested = os.getenv("LOG_LEVEL", level).upper()
    # getLevelName maps known names to ints and anything else to a string
    known = isinstance(logging.getLevelName(requested), int)

    root_logger = logging.getLogger()
    root_logger.setLevel(requested if known else level.upper())

    # Replace handlers installed by a previous call, keep foreign ones
    for handler in list(root_logger.handlers):
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(rich_handler)

    if not known:
        logging.getLogger(__name__).warning(
            "Unknown LOG_LEVEL %r, using %s", requested, level.upper()
        )
