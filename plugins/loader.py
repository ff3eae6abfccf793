"""
Load phase: runs every plugin's registration routine against one registry.

A failing plugin is logged and recorded, and loading continues with the next
plugin unless fail-fast is requested.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from config.settings import settings
from entity_registry import ErrorKind, Registry, RegistryError
from host.registrant_tracker import ActivePluginTracker
from .registry import PluginRegistry

logger = logging.getLogger(__name__)


@dataclass
class PluginResult:
    """Outcome of one plugin's registration routine."""
    plugin_id: str
    ok: bool
    error_kind: Optional[ErrorKind] = None
    message: str = ""


@dataclass
class LoadReport:
    """Per-plugin results of a load phase."""
    results: List[PluginResult] = field(default_factory=list)

    @property
    def loaded(self) -> List[str]:
        return [r.plugin_id for r in self.results if r.ok]

    @property
    def failed(self) -> List[PluginResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


class LoadPhase:
    """Drives plugin registration against a registry."""

    def __init__(self, registry: Registry, tracker: ActivePluginTracker,
                 plugin_registry: PluginRegistry, fail_fast: Optional[bool] = None):
        """
        Initialize the load phase.

        Args:
            registry: Registry populated by the plugins
            tracker: Registrant provider the registry was built with
            plugin_registry: Discovered plugins, run in load order
            fail_fast: Stop after the first failing plugin; defaults to settings
        """
        self.registry = registry
        self.tracker = tracker
        self.plugin_registry = plugin_registry
        self.fail_fast = settings.FAIL_FAST if fail_fast is None else fail_fast

    def run(self) -> LoadReport:
        """
        Run every plugin's registration routine.

        Returns:
            LoadReport with one result per plugin and per undiscoverable module
        """
        report = LoadReport()
        for module_path, message in self.plugin_registry.discovery_errors.items():
            report.results.append(PluginResult(module_path, ok=False, message=message))

        for plugin in self.plugin_registry.plugins():
            result = self._run_plugin(plugin)
            report.results.append(result)
            if not result.ok and self.fail_fast:
                logger.error(f"Load phase stopped after failure in {plugin.plugin_id}")
                break

        logger.info(
            f"Load phase complete: {len(report.loaded)} plugin(s) loaded, "
            f"{len(report.failed)} failed"
        )
        return report

    def _run_plugin(self, plugin) -> PluginResult:
        plugin_id = plugin.plugin_id
        logger.info(f"Loading plugin {plugin_id}")
        with self.tracker.activate(plugin_id):
            try:
                plugin.register(self.registry)
            except RegistryError as e:
                logger.error(f"Plugin {plugin_id} failed to register: {e}")
                return PluginResult(plugin_id, ok=False, error_kind=e.kind, message=str(e))
            except Exception as e:
                logger.error(f"Plugin {plugin_id} raised during registration: {e}", exc_info=True)
                return PluginResult(plugin_id, ok=False, message=f"{type(e).__name__}: {e}")
        return PluginResult(plugin_id, ok=True)
