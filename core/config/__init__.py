# ============================================================================
# CONFIGURATION MODULE
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Core - Configuration and defaults
# PURPOSE: Centralized configuration management
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Module

Provides centralized configuration and defaults for the locator.
"""

from core.config.defaults import (
    MapDefaults,
    LayerDefaults,
    HttpDefaults,
    Defaults,
    get_defaults,
    reset_defaults,
)

__all__ = [
    "MapDefaults",
    "LayerDefaults",
    "HttpDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
