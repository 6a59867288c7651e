"""Configuration module using Pydantic Settings.

Usage:
    from entityindex.config import IndexSettings

    settings = IndexSettings(record_operations=True, journal_size=100)
"""

from entityindex.config.settings import IndexSettings

__all__ = [
    "IndexSettings",
]
