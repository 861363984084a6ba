"""Logging setup for the command-line app."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Attach a rich handler to the package logger.

    Diagnostics go to stderr so they never mix with command output.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    logger = logging.getLogger("splitbook")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=verbose)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
