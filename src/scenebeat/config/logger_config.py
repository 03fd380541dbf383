"""Logger configuration for the collector."""

from loguru import logger

from .settings import CollectorConfig


def setup_logging(config: CollectorConfig) -> None:
    """Configure loguru logger for console and file output.

    Sets up logging with:
    - Console output with colored output
    - Optional file output with rotation and retention
    - Log level taken from the collector configuration
    """

    # Remove default loguru handler
    logger.remove()

    if config.log_to_console:
        logger.add(
            sink=lambda msg: print(msg, end=""),
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level=config.log_level,
            colorize=True,
        )

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            sink=str(config.log_file),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=config.log_level,
            rotation="10 MB",
            retention="7 days",
            compression="gz",  # Compress rotated logs
            enqueue=True,  # Thread-safe logging
        )

        logger.info(f"File logging enabled: {config.log_file}")
        logger.info(f"Log level: {config.log_level}")
