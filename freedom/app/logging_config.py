import sys

from loguru import logger


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default handler with a single colorized stderr sink."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )
    logger.debug(f"Logging initialized at level {level}")
