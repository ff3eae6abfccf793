"""
Plugins shipped with the host.
NOTE: defaults must load before any plugin that attaches stats.
"""
