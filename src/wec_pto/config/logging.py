"""Logging configuration for the PTO configuration package."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance for the module
    """
    if name.startswith("wec_pto."):
        name = name[len("wec_pto."):]
    return logging.getLogger(f"wec_pto.{name}")
