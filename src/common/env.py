"""Environment configuration interface for notes-sections.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level(default: str = "INFO") -> str:
        """Get the logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", default).upper()

    @staticmethod
    def reference_tie_break() -> str:
        """Get the rule used when an abbreviated reference matches several headers.

        Returns:
            'first' (caller order) or 'shortest', defaults to 'first'
        """
        return os.getenv("NOTES_TIE_BREAK", "first").lower()


# Singleton instance for convenient access
env = Environment()
