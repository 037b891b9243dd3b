# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized rendering configuration
# CREATED: 18 OCT 2026
# ============================================================================
"""
Configuration Module

Provides the rendering Config for the DDL compiler.
"""

from schemaddl.config.defaults import (
    Config,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "Config",
    "get_defaults",
    "reset_defaults",
]
