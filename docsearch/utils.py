import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s: %(message)s"


def setup_logging(level: str = LOG_LEVEL, verbosity: int = 0, force: bool = False) -> None:
    """Configure root logging. -v raises the level to INFO, -vv to DEBUG."""
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity == 1 and level != "DEBUG":
        level = "INFO"
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )
