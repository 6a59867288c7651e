"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the index.

Usage:
    from entityindex.config import IndexSettings

    # Load from environment variables (ENTITYINDEX_*)
    settings = IndexSettings()

    # Or override with explicit values
    settings = IndexSettings(thread_safe=False)
"""

from __future__ import annotations

from pydantic import Field

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install entityindex"
    ) from e


class IndexSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for an Index instance.

    Attributes:
        thread_safe: Guard each (partition, table) with a lock.
        lock_stripes: Size of the lock pool tables are hashed onto.
        warn_on_refile: Emit IndexWarning when an entity is created under a
            second key without an intervening delete.
        record_operations: Attach an InMemoryJournal when none is given.
        journal_size: Capacity of the default InMemoryJournal.

    Environment Variables:
        ENTITYINDEX_THREAD_SAFE
        ENTITYINDEX_LOCK_STRIPES
        ENTITYINDEX_WARN_ON_REFILE
        ENTITYINDEX_RECORD_OPERATIONS
        ENTITYINDEX_JOURNAL_SIZE
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTITYINDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    thread_safe: bool = True
    lock_stripes: int = Field(default=64, ge=1)
    warn_on_refile: bool = True
    record_operations: bool = False
    journal_size: int = Field(default=1000, ge=0)
