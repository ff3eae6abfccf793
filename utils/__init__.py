"""
Helpers for the entity registry host.
"""
