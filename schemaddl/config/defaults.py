# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# STATUS: Core - Rendering configuration
# PURPOSE: Which statement classes to emit, for which dialect, how
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Defaults

Rendering configuration for the DDL compiler.

Design:
- Immutable dataclass, one instance per generation call
- Environment variable overrides through from_env() (callers only; the
  compiler itself never reads the environment)
"""

import os
from dataclasses import dataclass
from typing import Optional, Union

from schemaddl.contracts import Dialect


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() == "true"


@dataclass(frozen=True)
class Config:
    """
    Rendering configuration.

    dialect accepts a Dialect or its string value; unknown values are
    rejected when the generator resolves its policy.
    """
    # Statement classes
    emit_tables: bool = True
    emit_foreign_keys: bool = True

    # Target
    dialect: Union[Dialect, str] = Dialect.GOOGLE_SQL

    # Quote Spanner identifiers (avoids reserved-word clashes)
    protect_ids: bool = False

    # Print table/column comments (Spanner dialects)
    comments: bool = False

    # Skip tables with unresolved references and collect the errors
    skip_failed_tables: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Create from environment variables."""
        return cls(
            emit_tables=_env_flag("DDL_EMIT_TABLES", True),
            emit_foreign_keys=_env_flag("DDL_EMIT_FOREIGN_KEYS", True),
            dialect=os.getenv("DDL_DIALECT", Dialect.GOOGLE_SQL.value),
            protect_ids=_env_flag("DDL_PROTECT_IDS", False),
            comments=_env_flag("DDL_COMMENTS", False),
            skip_failed_tables=_env_flag("DDL_SKIP_FAILED_TABLES", False),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

_defaults: Optional[Config] = None


def get_defaults() -> Config:
    """Get the environment-derived default config."""
    global _defaults
    if _defaults is None:
        _defaults = Config.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "Config",
    "get_defaults",
    "reset_defaults",
]
