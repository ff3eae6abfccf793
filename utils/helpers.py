"""
Utility functions and helpers for the entity registry host.
Includes logging setup and load-phase report formatting.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Any, Dict

from config.settings import settings


def setup_logging():
    """Set up logging configuration for the application."""
    handlers = [logging.StreamHandler(sys.stdout)]

    if settings.LOG_TO_FILE:
        # Create logs directory if it doesn't exist
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        log_file = os.path.join(settings.LOG_DIR, f"entity_registry_{datetime.now().strftime('%Y%m%d')}.log")
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=settings.LOG_FORMAT,
        datefmt=settings.LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )

    logger = logging.getLogger(__name__)
    logger.info("Logging system initialized")


def format_load_report(report: Any) -> str:
    """
    Format a load-phase report for display.

    Args:
        report: LoadReport returned by the load phase

    Returns:
        Formatted string representation
    """
    output = [f"Plugins loaded: {len(report.loaded)}, failed: {len(report.failed)}"]

    for result in report.results:
        if result.ok:
            output.append(f"  [ok]     {result.plugin_id}")
        else:
            kind = result.error_kind.value if result.error_kind else "error"
            output.append(f"  [{kind}] {result.plugin_id}: {result.message}")

    return "\n".join(output)


def format_registry_summary(summary: Dict[str, int]) -> str:
    """
    Format registry statistics as one line.

    Args:
        summary: Dictionary returned by Registry.summary()

    Returns:
        Formatted string representation
    """
    return ", ".join(f"{name}={count}" for name, count in summary.items())
