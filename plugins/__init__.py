"""
Plugin system for discovering registration plugins and running the load phase.
"""

from .registry import PluginRegistry, ModulePlugin
from .loader import LoadPhase, LoadReport, PluginResult

__all__ = ['PluginRegistry', 'ModulePlugin', 'LoadPhase', 'LoadReport', 'PluginResult']
