"""
Central logging configuration for repeatcal.

Sets levels for the repeatcal module loggers and quiets the third-party
libraries it pulls in, while keeping WARNING/ERROR output for diagnostics.
"""

import logging
import os
from typing import Optional

REPEATCAL_MODULES = [
    "repeatcal",
    "repeatcal.recurrence",
    "repeatcal.event_builder",
    "repeatcal.config_loader",
    "repeatcal.date_utils",
]

# Third-party loggers that are noisy at DEBUG
SUPPRESSED_LOGGERS = {
    "dateutil": logging.WARNING,
    "yaml": logging.WARNING,
}


def configure_logging(debug_mode: bool = False, force_debug: Optional[bool] = None) -> None:
    """
    Configure logging levels for repeatcal.

    Args:
        debug_mode: Whether to enable debug logging for repeatcal modules
        force_debug: Override debug mode setting (None to use env var detection)

    Environment Variables:
        REPEATCAL_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        REPEATCAL_LOG_LEVEL: Override root log level (DEBUG, INFO, WARNING, ERROR)
    """
    env_debug = os.getenv("REPEATCAL_DEBUG", "").lower() in ("1", "true", "yes")
    env_log_level = os.getenv("REPEATCAL_LOG_LEVEL", "").upper()

    if force_debug is not None:
        final_debug = force_debug
    elif env_debug:
        final_debug = True
    else:
        final_debug = debug_mode

    root_level = logging.DEBUG if final_debug else logging.INFO
    if env_log_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
        root_level = getattr(logging, env_log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(root_level)

    # Only add a handler if none exist, so host applications keep their own setup
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(root_level)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
        root_logger.addHandler(handler)

    logger_config: dict[str, int] = dict(SUPPRESSED_LOGGERS)
    module_level = logging.DEBUG if final_debug else logging.INFO
    for module in REPEATCAL_MODULES:
        logger_config[module] = module_level

    for logger_name, level in logger_config.items():
        logging.getLogger(logger_name).setLevel(level)

    if final_debug:
        root_logger.debug("Debug logging enabled for repeatcal modules")


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}

    for logger_name in ["repeatcal", *SUPPRESSED_LOGGERS]:
        status[logger_name] = logging.getLevelName(logging.getLogger(logger_name).level)

    return status
