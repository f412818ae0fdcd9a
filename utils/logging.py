"""Centralized logging configuration for the flow LLM adapter."""

import logging
import os
import sys


def setup_logging() -> None:
    """Configure root logger from environment variables."""
    level = os.getenv("LOG_LEVEL", "INFO")
    fmt = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Console logs go to stderr so completions printed on stdout stay clean
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    log_file = os.getenv("LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level.upper(),
        format=fmt,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )
