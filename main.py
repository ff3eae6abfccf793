#!/usr/bin/env python3
"""
Host entry point for the entity registry.
Wires the registry, runs the plugin load phase and reports the outcome.
"""

import logging
import sys
from typing import List, Optional

from config.settings import settings
from di import ComponentFactory
from entity_registry import Registry
from plugins.loader import LoadPhase, LoadReport
from utils.helpers import setup_logging, format_load_report, format_registry_summary

logger = logging.getLogger(__name__)


def run_load_phase(plugin_modules: Optional[List[str]] = None) -> LoadReport:
    """
    Build the registry and run every configured plugin against it.

    Args:
        plugin_modules: Plugin module paths, defaults to settings.PLUGIN_MODULES

    Returns:
        LoadReport of the run
    """
    container = ComponentFactory().build(plugin_modules)
    report = container.resolve(LoadPhase).run()

    registry = container.resolve(Registry)
    logger.info(f"Registry contents: {format_registry_summary(registry.summary())}")
    return report


def main() -> int:
    """Main entry point for the load phase."""
    setup_logging()

    # Validate configuration
    try:
        settings.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    # Plugin modules given on the command line override the configured ones
    plugin_modules = sys.argv[1:] or None
    report = run_load_phase(plugin_modules)

    print(format_load_report(report))
    return 0 if report.ok else 1


if __name__ == "__main__":
    sys.exit(main())
