# ============================================================================
# ICON FACTORY
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Service - Marker iconography and marker content
# PURPOSE: Map project categories to marker descriptors, HTML and labels
# CREATED: 19 OCT 2026
# ============================================================================
"""
Icon Factory

Single category table drives every category-dependent thing the UI shows:
marker color and glyph, tooltip border, form option labels, list glyphs.

All functions here are pure. icon_for() returns the same descriptor object
for the same category, so descriptors can be compared or snapshotted.

HTML is rendered with Jinja2 autoescaping - project names and descriptions
are user text.
"""

from typing import Any, Dict, List

from jinja2 import Environment, select_autoescape

from core.contracts import ProjectCategory
from core.models import IconDescriptor, PopupLine, Project


# ============================================================================
# CATEGORY TABLE
# ============================================================================

CATEGORY_TABLE: Dict[ProjectCategory, IconDescriptor] = {
    ProjectCategory.HYDRO: IconDescriptor(
        category=ProjectCategory.HYDRO, color="#3b82f6", glyph="\u26a1", label="Hydro Power",
    ),
    ProjectCategory.EDUCATION: IconDescriptor(
        category=ProjectCategory.EDUCATION, color="#f59e0b", glyph="\U0001f393", label="Education",
    ),
    ProjectCategory.HEALTH: IconDescriptor(
        category=ProjectCategory.HEALTH, color="#ef4444", glyph="\U0001f3e5", label="Health",
    ),
    ProjectCategory.INFRASTRUCTURE: IconDescriptor(
        category=ProjectCategory.INFRASTRUCTURE, color="#8b5cf6", glyph="\U0001f3d7\ufe0f",
        label="Infrastructure",
    ),
    ProjectCategory.OTHER: IconDescriptor(
        category=ProjectCategory.OTHER, color="#6b7280", glyph="\U0001f4cd", label="Other",
    ),
}


def icon_for(category: Any) -> IconDescriptor:
    """
    Marker descriptor for a category.

    Total over any input: values outside the closed set get the OTHER preset.
    """
    return CATEGORY_TABLE[ProjectCategory.coerce(category)]


def category_options() -> List[Dict[str, str]]:
    """Options for the form's category selector, in table order."""
    return [
        {
            "value": descriptor.category.value,
            "label": f"{descriptor.glyph} {descriptor.label}",
            "color": descriptor.color,
        }
        for descriptor in CATEGORY_TABLE.values()
    ]


# ============================================================================
# HTML TEMPLATES
# ============================================================================

_env = Environment(autoescape=select_autoescape(default=True, default_for_string=True))

_MARKER_TEMPLATE = _env.from_string(
    '<div style="background-color: {{ icon.color }}; '
    'width: {{ shape.size[0] }}px; height: {{ shape.size[1] }}px; '
    'border-radius: {{ shape.border_radius }}; '
    'transform: rotate({{ shape.rotation_deg }}deg); '
    'border: {{ shape.border }}; box-shadow: {{ shape.shadow }}; '
    'display: flex; align-items: center; justify-content: center; '
    'animation: {{ shape.animation }};">'
    '<span style="transform: rotate({{ -shape.rotation_deg }}deg); '
    'font-size: {{ shape.glyph_size_px }}px;">{{ icon.glyph }}</span>'
    '</div>'
    '<style>'
    '@keyframes markerDrop {'
    ' 0% { transform: translateY(-200px) rotate({{ shape.rotation_deg }}deg); opacity: 0; }'
    ' 60% { transform: translateY(10px) rotate({{ shape.rotation_deg }}deg); opacity: 1; }'
    ' 100% { transform: translateY(0) rotate({{ shape.rotation_deg }}deg); } }'
    '@keyframes markerBounce {'
    ' 0%, 100% { transform: translateY(0) rotate({{ shape.rotation_deg }}deg); }'
    ' 50% { transform: translateY(-10px) rotate({{ shape.rotation_deg }}deg); } }'
    '</style>'
)

_TOOLTIP_TEMPLATE = _env.from_string(
    '<div style="background: white; padding: 8px 12px; border-radius: 8px; '
    'box-shadow: 0 4px 6px rgba(0,0,0,0.1); border: 2px solid {{ icon.color }}; '
    'font-family: system-ui, -apple-system, sans-serif;">'
    '<div style="font-weight: bold; font-size: 14px; margin-bottom: 4px;">{{ project.name }}</div>'
    '<div style="font-size: 12px; color: #666; margin-bottom: 2px;">\U0001f4cd {{ project.district }}</div>'
    '<div style="font-size: 11px; color: #888;">{{ project.description }}</div>'
    '</div>'
)


def icon_html(icon: IconDescriptor) -> str:
    """Drop-pin marker markup with its entrance animation."""
    return _MARKER_TEMPLATE.render(icon=icon, shape=icon.shape)


def tooltip_html(project: Project) -> str:
    """Hover tooltip for a project marker, bordered in the category color."""
    return _TOOLTIP_TEMPLATE.render(project=project, icon=icon_for(project.category))


# ============================================================================
# TEXT CONTENT
# ============================================================================

def popup_lines(project: Project) -> List[PopupLine]:
    """Lines of the marker popup (the one with the delete button)."""
    return [
        PopupLine(key="Name", value=project.name),
        PopupLine(key="District", value=project.district),
        PopupLine(key="Description", value=project.description),
        PopupLine(key="Type", value=project.category.value),
    ]


def list_label(project: Project) -> str:
    """Glyph and district, as shown under the name in the project list."""
    return f"{icon_for(project.category).glyph} {project.district}"


def coordinates_label(project: Project) -> str:
    return f"Lat: {project.lat:.4f}, Lng: {project.lng:.4f}"


__all__ = [
    "CATEGORY_TABLE",
    "icon_for",
    "category_options",
    "icon_html",
    "tooltip_html",
    "popup_lines",
    "list_label",
    "coordinates_label",
]
