"""dutoan construction cost estimator.

Usage::

    from dutoan import apply_edit, create_default_engine, default_inputs

    engine = create_default_engine()
    inputs = default_inputs()
    for field, value in {"width": "10", "length": "8", "numFloors": "2"}.items():
        inputs = apply_edit(inputs, field, value)
    result = engine.estimate(inputs)  # None until the geometry is filled in
"""

from dutoan.data.repository import CatalogRepository
from dutoan.engine import EstimatorEngine
from dutoan.factory import create_default_engine
from dutoan.form import (
    apply_edit,
    coerce_number,
    default_inputs,
    select_basement,
    select_foundation,
    select_package,
    select_roof,
)
from dutoan.formatting import format_area, format_currency, format_unit_price
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
    "CatalogRepository",
    "Category",
    "ComponentBreakdown",
    "EstimatorEngine",
    "FoundationType",
    "PackageTier",
    "RoofType",
    "apply_edit",
    "coerce_number",
    "create_default_engine",
    "default_inputs",
    "format_area",
    "format_currency",
    "format_unit_price",
    "select_basement",
    "select_foundation",
    "select_package",
    "select_roof",
]
