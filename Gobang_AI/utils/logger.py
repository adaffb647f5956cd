"""Lightweight logging utilities for matches and debugging."""

import datetime
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def configure_logging(verbose=False):
    """Route engine loggers (`Gobang_AI.*`) to stderr; DEBUG shows search decisions."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)
