"""
Configuration for the entity registry host.
"""
