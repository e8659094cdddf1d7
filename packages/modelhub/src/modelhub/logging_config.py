"""Logging setup for the API server and CLI."""

import logging


def setup_logging(level: str = "INFO", verbose: bool = False) -> None:
    """Configure root logging; repeated calls only adjust the level."""
    log_level = logging.DEBUG if verbose else level.upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger().setLevel(log_level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
