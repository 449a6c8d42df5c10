# ============================================================================
# BASE CONTRACTS & ENUMS
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Foundation - Core enums shared by models, services and API
# PURPOSE: Closed value sets for categories, layers and load states
# CREATED: 19 OCT 2026
# EXPORTS: ProjectCategory, LayerType, LoadStatus, HoverPhase
# DEPENDENCIES: enum
# ============================================================================
"""
Base contracts for the Project Locator.

These are the closed sets that cross every boundary:
- Python (services, controllers)
- HTTP (request/response bodies)
- Browser (marker and layer rendering)
"""

from enum import Enum


# ============================================================================
# STATUS ENUMS
# ============================================================================

class ProjectCategory(str, Enum):
    """Project categories. Drives marker color, glyph and labels."""
    HYDRO = "hydro"
    EDUCATION = "education"
    HEALTH = "health"
    INFRASTRUCTURE = "infrastructure"
    OTHER = "other"

    @classmethod
    def coerce(cls, value) -> "ProjectCategory":
        """Map any value onto the closed set, falling back to OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class LayerType(str, Enum):
    """Boundary resolutions offered by the layer selector."""
    BASIC = "basic"                # Country outline only
    DISTRICTS = "districts"        # Country with district boundaries
    PROVINCES = "provinces"        # Country with province boundaries


class LoadStatus(str, Enum):
    """
    Boundary layer load states.

    State transitions:
        IDLE -> LOADING -> LOADED
                        -> FAILED
        LOADED/FAILED -> LOADING (new selection)
    """
    IDLE = "idle"                  # Nothing requested yet
    LOADING = "loading"            # Fetch in flight for the current selection
    LOADED = "loaded"              # Document available
    FAILED = "failed"              # Fetch or parse failed, base imagery shown

    def has_document(self) -> bool:
        """Check if a boundary document is available in this state."""
        return self is LoadStatus.LOADED


class HoverPhase(str, Enum):
    """Pointer transitions over a boundary feature."""
    ENTER = "enter"
    EXIT = "exit"


__all__ = [
    "ProjectCategory",
    "LayerType",
    "LoadStatus",
    "HoverPhase",
]
