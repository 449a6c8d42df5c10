# ============================================================================
# BOUNDARY FEATURE MODELS
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Domain model - GeoJSON boundary documents and paint styles
# PURPOSE: Parse external boundary data; describe style and popup effects
# CREATED: 19 OCT 2026
# ============================================================================
"""
Boundary Feature Models

Boundary documents are external GeoJSON FeatureCollections. The core never
looks at geometry; it only needs the property bag of each feature.

Validation is deliberately shallow - "is it a FeatureCollection whose
features are objects". Anything beyond that is the mapping library's
business.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class BoundaryFeature(BaseModel):
    """One administrative region outline."""

    type: Literal["Feature"] = "Feature"
    id: Optional[Any] = None
    geometry: Optional[Dict[str, Any]] = None
    properties: Optional[Dict[str, Any]] = None

    model_config = {"extra": "allow"}


class BoundaryDocument(BaseModel):
    """A GeoJSON FeatureCollection for one layer selection."""

    type: Literal["FeatureCollection"]
    features: List[BoundaryFeature] = Field(default_factory=list)

    model_config = {"extra": "allow"}

    def __len__(self) -> int:
        return len(self.features)


class StylePatch(BaseModel):
    """
    Paint options for a boundary path.

    Serialized with the mapping library's option names (fillColor,
    fillOpacity). Unset fields are left untouched by the renderer.
    """

    color: Optional[str] = None
    weight: Optional[float] = None
    opacity: Optional[float] = Field(default=None, ge=0, le=1)
    fill_color: Optional[str] = Field(default=None, alias="fillColor")
    fill_opacity: Optional[float] = Field(default=None, alias="fillOpacity", ge=0, le=1)

    model_config = {"frozen": True, "populate_by_name": True}

    def to_path_options(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class PopupLine(BaseModel):
    """A single 'key: value' line of popup content."""

    key: str
    value: str

    model_config = {"frozen": True}


__all__ = ["BoundaryFeature", "BoundaryDocument", "StylePatch", "PopupLine"]
