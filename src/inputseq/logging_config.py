"""Logging configuration for inputseq."""
import logging
import sys
from typing import Optional, Union


def setup_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None
) -> logging.Logger:
    """Set up a logger with the specified configuration.

    Calling it again for an existing logger only updates the level, so
    objects built after a config change can apply the configured level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    # Disable propagation to prevent duplicate logs when child loggers have handlers
    logger.propagate = False

    if logger.handlers:
        # Only the handler created here; handlers attached by others keep their level
        for handler in logger.handlers:
            if handler.get_name() == name:
                handler.setLevel(level)
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(name)
        handler.setLevel(level)

        if format_string is None:
            format_string = (
                "%(asctime)s - %(name)s - %(levelname)s - "
                "[%(filename)s:%(lineno)d] - %(message)s"
            )

        formatter = logging.Formatter(format_string)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


# Default logger
logger = setup_logger("inputseq")
