"""Enums for the dutoan domain models.

These enums represent the selectable options on the estimator form:
structural types that carry a default surcharge coefficient, the
package tiers that fix the unit price, and the breakdown categories.
"""

from enum import StrEnum


class FoundationType(StrEnum):
    """Foundation systems, each with a default coefficient."""

    SINGLE = "single"
    PILE = "pile"
    STRIP = "strip"
    RAFT = "raft"


class BasementType(StrEnum):
    """Basement depth classes."""

    NONE = "none"
    SEMI = "semi"
    ONE_LEVEL = "one_level"
    MULTI_LEVEL = "multi_level"


class RoofType(StrEnum):
    """Roof construction types."""

    CONCRETE = "concrete"
    METAL_SHEET = "metal_sheet"
    TILE_TRUSS = "tile_truss"
    TILE_CONCRETE = "tile_concrete"


class PackageTier(StrEnum):
    """Pricing presets (unit price per m² of weighted area)."""

    ECONOMY = "economy"
    STANDARD = "standard"
    PREMIUM = "premium"
    CUSTOM = "custom"


class Category(StrEnum):
    """Structural categories of the cost breakdown, in display order."""

    FOUNDATION = "foundation"
    BASEMENT = "basement"
    GROUND_FLOOR = "ground_floor"
    UPPER_FLOORS = "upper_floors"
    TERRACE = "terrace"
    ROOF = "roof"
