# ============================================================================
# CONFIGURATION DEFAULTS
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Core - Default configuration values
# PURPOSE: Centralized defaults for viewport, boundary layers and HTTP
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Defaults

Provides the map, layer and HTTP settings for the locator.
These can be overridden via environment variables.

Design:
- Immutable dataclasses for defaults
- Environment variable overrides
- Type-safe access
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from core.contracts import LayerType


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class MapDefaults:
    """
    Defaults for the map viewport.

    Bounds are (south, west, north, east) in degrees.
    """
    # Overview view of the whole country
    default_center: Tuple[float, float] = (28.3949, 84.124)
    default_zoom: float = 7.5

    # Zoom limits and the zoom used when focusing a project
    min_zoom: float = 7.5
    max_zoom: float = 13.0
    focus_zoom: float = 12.0

    # Panning is not allowed outside this rectangle
    bounds: Tuple[float, float, float, float] = (26.3, 80.0, 30.5, 88.3)

    # Layer switches keep the current view unless enabled
    reset_on_layer_change: bool = False

    @classmethod
    def from_env(cls) -> "MapDefaults":
        """Create from environment variables."""
        return cls(
            default_zoom=float(os.getenv("MAP_DEFAULT_ZOOM", 7.5)),
            min_zoom=float(os.getenv("MAP_MIN_ZOOM", 7.5)),
            max_zoom=float(os.getenv("MAP_MAX_ZOOM", 13)),
            focus_zoom=float(os.getenv("MAP_FOCUS_ZOOM", 12)),
            reset_on_layer_change=_env_bool("MAP_RESET_ON_LAYER_CHANGE", False),
        )


@dataclass(frozen=True)
class LayerDefaults:
    """
    Defaults for boundary layers.

    Each selector choice resolves to its own GeoJSON resource.
    """
    base_url: str = "http://localhost:8000/boundaries"
    data_dir: str = "./boundaries"
    default_layer: LayerType = LayerType.DISTRICTS

    resources: Dict[LayerType, str] = field(default_factory=lambda: {
        LayerType.BASIC: "nepal-acesmndr.geojson",
        LayerType.DISTRICTS: "nepal-with-districts-acesmndr.geojson",
        LayerType.PROVINCES: "nepal-with-provinces-acesmndr.geojson",
    })

    labels: Dict[LayerType, str] = field(default_factory=lambda: {
        LayerType.BASIC: "Basic Nepal",
        LayerType.DISTRICTS: "With Districts",
        LayerType.PROVINCES: "With Provinces",
    })

    # Base imagery shown when no boundary document is available
    tile_url: str = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
    tile_attribution: str = (
        '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a>'
    )

    # Seed the store with two sample projects at startup
    seed_demo_projects: bool = False

    @classmethod
    def from_env(cls) -> "LayerDefaults":
        """Create from environment variables."""
        return cls(
            base_url=os.getenv("BOUNDARY_BASE_URL", "http://localhost:8000/boundaries"),
            data_dir=os.getenv("BOUNDARY_DATA_DIR", "./boundaries"),
            default_layer=LayerType(os.getenv("DEFAULT_LAYER", LayerType.DISTRICTS.value)),
            seed_demo_projects=_env_bool("SEED_DEMO_PROJECTS", False),
        )


@dataclass(frozen=True)
class HttpDefaults:
    """Timeouts for boundary fetches (seconds)."""
    timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0

    @classmethod
    def from_env(cls) -> "HttpDefaults":
        """Create from environment variables."""
        return cls(
            timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", 30)),
            connect_timeout_seconds=float(os.getenv("HTTP_CONNECT_TIMEOUT_SECONDS", 10)),
        )


# ============================================================================
# GLOBAL DEFAULTS INSTANCE
# ============================================================================

@dataclass
class Defaults:
    """Container for all default configurations."""
    map: MapDefaults = field(default_factory=MapDefaults)
    layers: LayerDefaults = field(default_factory=LayerDefaults)
    http: HttpDefaults = field(default_factory=HttpDefaults)

    @classmethod
    def from_env(cls) -> "Defaults":
        """Create all defaults from environment variables."""
        return cls(
            map=MapDefaults.from_env(),
            layers=LayerDefaults.from_env(),
            http=HttpDefaults.from_env(),
        )


_defaults: Optional[Defaults] = None


def get_defaults() -> Defaults:
    """Get global defaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = Defaults.from_env()
    return _defaults


def reset_defaults() -> None:
    """Reset defaults (for testing)."""
    global _defaults
    _defaults = None


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "MapDefaults",
    "LayerDefaults",
    "HttpDefaults",
    "Defaults",
    "get_defaults",
    "reset_defaults",
]
