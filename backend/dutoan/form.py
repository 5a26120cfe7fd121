"""Form-state transitions for the estimator inputs.

The form holds a single ``CalculationInputs`` record. Each edit replaces
it wholesale with a new record; nothing is mutated in place.

Selector fields follow an explicit reset rule: choosing a foundation,
basement or roof type sets the matching coefficient to that type's table
default. Editing the coefficient directly afterwards overrides it until the
selector changes again.
"""

from __future__ import annotations

import logging
import math
from enum import StrEnum
from typing import Any

from dutoan.data.coefficients import DEFAULT_FLOOR_COEFF, DEFAULT_TERRACE_COEFF
from dutoan.data.prices import DEFAULT_CUSTOM_UNIT_PRICE
from dutoan.data.repository import CatalogRepository
from dutoan.exceptions import InvalidSelectionError, UnknownFieldError
from dutoan.models.enums import (
    BasementType,
    FoundationType,
    PackageTier,
    RoofType,
)
from dutoan.models.inputs import CalculationInputs

logger = logging.getLogger(__name__)

_NUMERIC_FIELDS = frozenset({
    "width",
    "length",
    "foundation_coeff",
    "basement_coeff",
    "floor_coeff",
    "terrace_coeff",
    "roof_coeff",
    "custom_unit_price",
})

_INTEGER_FIELDS = frozenset({"num_floors"})

_TRUTHY = frozenset({"true", "on", "1", "yes"})

_DEFAULT_CATALOG = CatalogRepository()


def coerce_number(raw: Any) -> float:
    """Coerce a raw form value to a float.

    Empty text, None and malformed numbers become 0 rather than errors.
    """
    if raw is None or isinstance(raw, bool):
        return float(bool(raw))
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return 0.0
    else:
        text = str(raw).strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return 0.0
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


def coerce_bool(raw: Any) -> bool:
    """Coerce a checkbox-style value to a bool."""
    if isinstance(raw, str):
        return raw.strip().lower() in _TRUTHY
    return bool(raw)


def _field_name(name: str) -> str:
    """Map a camelCase alias (``numFloors``) to its field name."""
    if name in CalculationInputs.model_fields:
        return name
    for field_name, info in CalculationInputs.model_fields.items():
        if info.alias == name:
            return field_name
    msg = f"Unknown input field: {name!r}"
    raise UnknownFieldError(msg)


def _parse_choice(enum_cls: type[StrEnum], value: Any) -> Any:
    try:
        return enum_cls(value)
    except ValueError as exc:
        options = ", ".join(member.value for member in enum_cls)
        msg = f"Invalid {enum_cls.__name__} {value!r}; expected one of: {options}"
        raise InvalidSelectionError(msg) from exc


def default_inputs(catalog: CatalogRepository | None = None) -> CalculationInputs:
    """Return the initial form state: empty geometry, table defaults elsewhere."""
    catalog = catalog or _DEFAULT_CATALOG
    return CalculationInputs(
        width=0.0,
        length=0.0,
        foundation=FoundationType.PILE,
        foundation_coeff=catalog.foundation_coeff(FoundationType.PILE),
        basement=BasementType.NONE,
        basement_coeff=catalog.basement_coeff(BasementType.NONE),
        num_floors=0,
        floor_coeff=DEFAULT_FLOOR_COEFF,
        has_terrace=False,
        terrace_coeff=DEFAULT_TERRACE_COEFF,
        roof=RoofType.CONCRETE,
        roof_coeff=catalog.roof_coeff(RoofType.CONCRETE),
        package_tier=PackageTier.STANDARD,
        custom_unit_price=DEFAULT_CUSTOM_UNIT_PRICE,
    )


def select_foundation(
    inputs: CalculationInputs,
    foundation: FoundationType,
    catalog: CatalogRepository | None = None,
) -> CalculationInputs:
    catalog = catalog or _DEFAULT_CATALOG
    return inputs.model_copy(update={
        "foundation": foundation,
        "foundation_coeff": catalog.foundation_coeff(foundation),
    })


def select_basement(
    inputs: CalculationInputs,
    basement: BasementType,
    catalog: CatalogRepository | None = None,
) -> CalculationInputs:
    catalog = catalog or _DEFAULT_CATALOG
    return inputs.model_copy(update={
        "basement": basement,
        "basement_coeff": catalog.basement_coeff(basement),
    })


def select_roof(
    inputs: CalculationInputs,
    roof: RoofType,
    catalog: CatalogRepository | None = None,
) -> CalculationInputs:
    catalog = catalog or _DEFAULT_CATALOG
    return inputs.model_copy(update={
        "roof": roof,
        "roof_coeff": catalog.roof_coeff(roof),
    })


def select_package(inputs: CalculationInputs, tier: PackageTier) -> CalculationInputs:
    # Switching tiers keeps the custom price the user typed.
    return inputs.model_copy(update={"package_tier": tier})


def apply_edit(
    inputs: CalculationInputs,
    field: str,
    value: Any,
    catalog: CatalogRepository | None = None,
) -> CalculationInputs:
    """Apply a single form edit and return the new inputs record.

    Args:
        inputs: Current form state.
        field: Field name or its camelCase alias.
        value: Raw value from the form (text, number or bool).
        catalog: Source of selector defaults; the built-in tables if omitted.

    Raises:
        UnknownFieldError: If ``field`` is not an input field.
        InvalidSelectionError: If a selector receives an unknown option.
    """
    name = _field_name(field)

    if name in _NUMERIC_FIELDS:
        return inputs.model_copy(update={name: coerce_number(value)})
    if name in _INTEGER_FIELDS:
        return inputs.model_copy(update={name: int(coerce_number(value))})
    if name == "has_terrace":
        return inputs.model_copy(update={name: coerce_bool(value)})
    if name == "foundation":
        return select_foundation(inputs, _parse_choice(FoundationType, value), catalog)
    if name == "basement":
        return select_basement(inputs, _parse_choice(BasementType, value), catalog)
    if name == "roof":
        return select_roof(inputs, _parse_choice(RoofType, value), catalog)
    if name == "package_tier":
        return select_package(inputs, _parse_choice(PackageTier, value))

    # Every model field is handled above; reaching here means the model grew.
    msg = f"No edit rule for input field: {name!r}"
    logger.error(msg)
    raise UnknownFieldError(msg)
