# ============================================================================
# INFRASTRUCTURE MODULE
# ============================================================================
# EPOCH: 1 - MAP STATE ENGINE
# STATUS: Infrastructure - External data access
# PURPOSE: Boundary document retrieval
# CREATED: 19 OCT 2026
# ============================================================================
"""
Infrastructure module for the locator.

Provides:
- BoundarySource: abstract boundary document provider
- HttpBoundarySource: httpx-backed GeoJSON fetcher
- parse_boundary_document: payload validation

Usage:
    from infrastructure import HttpBoundarySource

    source = HttpBoundarySource(base_url="http://localhost:8000/boundaries")
    document = await source.fetch("nepal-with-districts-acesmndr.geojson")
"""

from infrastructure.boundary_source import (
    BoundarySource,
    HttpBoundarySource,
    parse_boundary_document,
)

__all__ = [
    'BoundarySource',
    'HttpBoundarySource',
    'parse_boundary_document',
]
