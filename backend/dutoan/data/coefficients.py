"""Default surcharge coefficients per structural type.

Each coefficient is a percentage of one floor's base area, following the
common Vietnamese rule-of-thumb for converting structural features into
billable floor area (e.g. a pile foundation counts as 40 % of a floor).
"""

from __future__ import annotations

from dutoan.models.enums import BasementType, FoundationType, RoofType

DEFAULT_FOUNDATION_COEFFS: dict[FoundationType, float] = {
    FoundationType.SINGLE: 25.0,
    FoundationType.PILE: 40.0,
    FoundationType.STRIP: 50.0,
    FoundationType.RAFT: 80.0,
}

DEFAULT_BASEMENT_COEFFS: dict[BasementType, float] = {
    BasementType.NONE: 0.0,
    BasementType.SEMI: 100.0,
    BasementType.ONE_LEVEL: 150.0,
    BasementType.MULTI_LEVEL: 250.0,
}

DEFAULT_ROOF_COEFFS: dict[RoofType, float] = {
    RoofType.CONCRETE: 50.0,
    RoofType.METAL_SHEET: 30.0,
    RoofType.TILE_TRUSS: 70.0,
    RoofType.TILE_CONCRETE: 100.0,
}

# Ground floor always counts at 100 %; each floor above it adds this much.
DEFAULT_FLOOR_COEFF = 100.0
GROUND_FLOOR_COEFF = 100.0

DEFAULT_TERRACE_COEFF = 50.0
