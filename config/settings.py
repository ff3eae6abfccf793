"""
Centralized configuration management for the entity registry host.
Loads environment variables and provides default configurations.
"""

import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings and configuration."""

    # Registry
    FALLBACK_ENTITY_IDENTIFIER: str = os.getenv("FALLBACK_ENTITY_IDENTIFIER", "unknown")
    UNKNOWN_REGISTRANT: str = os.getenv("UNKNOWN_REGISTRANT", "Unknown")
    # Reported as registrant when no plugin is active (host-side registrations)
    HOST_REGISTRANT: str = os.getenv("HOST_REGISTRANT", "host")

    # Load phase
    PLUGIN_MODULES: str = os.getenv(
        "PLUGIN_MODULES",
        "plugins.builtin.defaults,plugins.builtin.metals"
    )
    FAIL_FAST: bool = _env_flag("FAIL_FAST")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
    LOG_TO_FILE: bool = _env_flag("LOG_TO_FILE")
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")

    @classmethod
    def plugin_modules(cls) -> List[str]:
        """Configured plugin module paths, in load order."""
        return [m.strip() for m in cls.PLUGIN_MODULES.split(",") if m.strip()]

    @classmethod
    def validate(cls) -> None:
        """Validate that the registry settings are usable."""
        from entity_registry.validation import identifier_problem

        problem = identifier_problem(cls.FALLBACK_ENTITY_IDENTIFIER)
        if problem:
            raise ValueError(f"Invalid FALLBACK_ENTITY_IDENTIFIER: {problem}")

        if not cls.plugin_modules():
            raise ValueError("Missing required environment variables: PLUGIN_MODULES")

# Global settings instance
settings = Settings()
