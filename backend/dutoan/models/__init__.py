"""Domain models for the dutoan estimator."""

from dutoan.models.enums import (
    BasementType,
    Category,
    FoundationType,
    PackageTier,
    RoofType,
)
from dutoan.models.inputs import CalculationInputs
from dutoan.models.result import CalculationResult, ComponentBreakdown

__all__ = [
    "BasementType",
    "CalculationInputs",
    "CalculationResult",
    "Category",
    "ComponentBreakdown",
    "FoundationType",
    "PackageTier",
    "RoofType",
]
