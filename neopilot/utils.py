import logging
import sys


def setup_logging(*, verbose: bool = False) -> logging.Logger:
    """Configure logging for the neopilot CLI.

    Args:
        verbose: Emit DEBUG records instead of only warnings.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("neopilot")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Silence noisy third-party loggers
    logging.getLogger("dotenv").setLevel(logging.WARNING)

    return logger
