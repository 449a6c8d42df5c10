# ============================================================================
# MARKER ICON MODELS
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Domain model - Marker iconography descriptors
# PURPOSE: Describe a marker's color, glyph, shape and entrance animation
# CREATED: 19 OCT 2026
# ============================================================================
"""
Marker Icon Models

IconDescriptor is pure data. The rendering layer turns it into a DOM
element; services.icon_factory also renders the equivalent HTML snippet.
"""

from typing import Tuple

from pydantic import BaseModel, Field

from core.contracts import ProjectCategory


class IconShape(BaseModel):
    """Geometry and motion of the drop-pin marker. Same for all categories."""

    size: Tuple[int, int] = (32, 32)
    anchor: Tuple[int, int] = (16, 32)
    popup_anchor: Tuple[int, int] = (0, -32)
    border_radius: str = "50% 50% 50% 0"
    rotation_deg: int = -45
    border: str = "3px solid white"
    shadow: str = "0 4px 6px rgba(0,0,0,0.3)"
    glyph_size_px: int = 16
    animation: str = "markerDrop 0.6s ease-out, markerBounce 0.3s ease-out 0.6s"

    model_config = {"frozen": True}


class IconDescriptor(BaseModel):
    """Everything needed to draw a project marker."""

    category: ProjectCategory
    color: str = Field(..., pattern=r"^#[0-9a-fA-F]{6}$")
    glyph: str
    label: str
    shape: IconShape = Field(default_factory=IconShape)

    model_config = {"frozen": True}


__all__ = ["IconShape", "IconDescriptor"]
