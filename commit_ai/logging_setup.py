import sys

from loguru import logger


def configure_logging(debug: bool = False) -> None:
    """Route loguru output to stderr, verbose only when debugging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )
