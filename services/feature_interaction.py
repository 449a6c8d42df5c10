# ============================================================================
# FEATURE INTERACTION CONTROLLER
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Service - Boundary feature hover and popup content
# PURPOSE: Return style patches for hover transitions, build feature popups
# CREATED: 19 OCT 2026
# ============================================================================
"""
Feature Interaction Controller

Stateless. Each hover transition maps to one of two fixed presets, so
repeated enters are harmless and an exit always restores the base look no
matter what happened before it.

The controller never touches the renderer. It returns a StylePatch or popup
content and the rendering layer applies it.
"""

from typing import Any, List, Optional

from jinja2 import Environment, select_autoescape

from core.contracts import HoverPhase
from core.models import BoundaryFeature, PopupLine, StylePatch


# Style applied to every feature when the boundary layer is drawn
BASE_STYLE = StylePatch(
    color="#2563eb",
    weight=2,
    opacity=1,
    fill_color="#93c5fd",
    fill_opacity=0.6,
)

# Under the pointer: wider, darker stroke and a denser fill
HIGHLIGHT_STYLE = StylePatch(
    color="#666",
    weight=3,
    fill_opacity=0.7,
)

_env = Environment(autoescape=select_autoescape(default=True, default_for_string=True))

_POPUP_TEMPLATE = _env.from_string(
    "{% for line in lines %}<strong>{{ line.key }}:</strong> {{ line.value }}"
    "{% if not loop.last %}<br/>{% endif %}{% endfor %}"
)


def format_property_value(value: Any) -> str:
    """
    Render a property value the way the browser would stringify it.

    null/true/false in lower case, integral floats without a trailing ".0".
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class FeatureInteractionController:
    """Hover and popup handling for boundary features."""

    def __init__(
        self,
        base_style: StylePatch = BASE_STYLE,
        highlight_style: StylePatch = HIGHLIGHT_STYLE,
    ):
        self.base_style = base_style
        self.highlight_style = highlight_style

    def on_hover_enter(self, feature: BoundaryFeature) -> StylePatch:
        return self.highlight_style

    def on_hover_exit(self, feature: BoundaryFeature) -> StylePatch:
        return self.base_style

    def on_hover(self, feature: BoundaryFeature, phase: HoverPhase) -> StylePatch:
        """Dispatch a hover transition by phase."""
        if phase is HoverPhase.ENTER:
            return self.on_hover_enter(feature)
        return self.on_hover_exit(feature)

    def popup_content_for(self, feature: BoundaryFeature) -> List[PopupLine]:
        """
        Popup lines for a feature, in property-bag order.

        Returns an empty list when the feature has no properties. Callers
        must not show a popup in that case.
        """
        if not feature.properties:
            return []
        return [
            PopupLine(key=str(key), value=format_property_value(value))
            for key, value in feature.properties.items()
        ]

    def popup_html(self, feature: BoundaryFeature) -> Optional[str]:
        """Popup markup, or None when there is nothing to show."""
        lines = self.popup_content_for(feature)
        if not lines:
            return None
        return _POPUP_TEMPLATE.render(lines=lines)


__all__ = [
    "BASE_STYLE",
    "HIGHLIGHT_STYLE",
    "FeatureInteractionController",
    "format_property_value",
]
