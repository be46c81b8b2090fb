from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "metra_client_sdk"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = (level or os.getenv("METRA_LOG_LEVEL", "INFO")).upper()
    logger.setLevel(getattr(logging, resolved, logging.INFO))
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger


def mask_phone(phone: str | None) -> str:
    if not phone:
        return ""
    digits = "".join(ch for ch in phone if ch.isdigit())
    if len(digits) <= 4:
        return "*" * len(digits)
    return "*" * (len(digits) - 4) + digits[-4:]
