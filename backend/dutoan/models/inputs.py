"""Input model for the dutoan estimator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dutoan.models.enums import BasementType, FoundationType, PackageTier, RoofType


class CalculationInputs(BaseModel):
    """The estimator form state.

    The record is immutable: every edit produces a new instance (see
    ``dutoan.form``). Geometry fields may be zero so that an unfilled form
    is representable; the engine decides whether a result exists.

    Coefficients are percentages of one floor's base area. Out-of-range
    values (negative coefficients, for instance) are accepted as-is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    width: float = 0.0
    length: float = 0.0
    foundation: FoundationType = FoundationType.PILE
    foundation_coeff: float = Field(default=40.0, alias="foundationCoeff")
    basement: BasementType = BasementType.NONE
    basement_coeff: float = Field(default=0.0, alias="basementCoeff")
    num_floors: int = Field(default=0, alias="numFloors")
    floor_coeff: float = Field(default=100.0, alias="floorCoeff")
    has_terrace: bool = Field(default=False, alias="hasTerrace")
    terrace_coeff: float = Field(default=50.0, alias="terraceCoeff")
    roof: RoofType = RoofType.CONCRETE
    roof_coeff: float = Field(default=50.0, alias="roofCoeff")
    package_tier: PackageTier = Field(default=PackageTier.STANDARD, alias="packageTier")
    custom_unit_price: float = Field(default=5_000_000.0, alias="customUnitPrice")

    @property
    def is_complete(self) -> bool:
        """True when the geometry is filled in enough to produce a result."""
        return self.width > 0 and self.length > 0 and self.num_floors > 0
