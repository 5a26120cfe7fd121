"""Catalog repository for looking up coefficients, prices and labels."""

from __future__ import annotations

from typing import Any

from dutoan.data.coefficients import (
    DEFAULT_BASEMENT_COEFFS,
    DEFAULT_FLOOR_COEFF,
    DEFAULT_FOUNDATION_COEFFS,
    DEFAULT_ROOF_COEFFS,
    DEFAULT_TERRACE_COEFF,
)
from dutoan.data.labels import (
    BASEMENT_LABELS,
    CATEGORY_STYLES,
    FOUNDATION_LABELS,
    PACKAGE_LABELS,
    ROOF_LABELS,
    CategoryStyle,
)
from dutoan.data.prices import DEFAULT_CUSTOM_UNIT_PRICE, PACKAGE_PRICES
from dutoan.models.enums import (
    BasementType,
    Category,
    FoundationType,
    PackageTier,
    RoofType,
)


class CatalogRepository:
    """Repository over the estimator's static lookup tables.

    Wraps in-memory tables so the engine and form layer never reach into
    module-level dicts directly. Tables can be overridden per instance,
    e.g. to price a different market.
    """

    def __init__(
        self,
        package_prices: dict[PackageTier, float] | None = None,
        foundation_coeffs: dict[FoundationType, float] | None = None,
        basement_coeffs: dict[BasementType, float] | None = None,
        roof_coeffs: dict[RoofType, float] | None = None,
    ) -> None:
        self._package_prices = dict(PACKAGE_PRICES if package_prices is None else package_prices)
        self._foundation_coeffs = dict(
            DEFAULT_FOUNDATION_COEFFS if foundation_coeffs is None else foundation_coeffs
        )
        self._basement_coeffs = dict(
            DEFAULT_BASEMENT_COEFFS if basement_coeffs is None else basement_coeffs
        )
        self._roof_coeffs = dict(DEFAULT_ROOF_COEFFS if roof_coeffs is None else roof_coeffs)

    def foundation_coeff(self, foundation: FoundationType) -> float:
        return self._foundation_coeffs[foundation]

    def basement_coeff(self, basement: BasementType) -> float:
        return self._basement_coeffs[basement]

    def roof_coeff(self, roof: RoofType) -> float:
        return self._roof_coeffs[roof]

    def unit_price(self, tier: PackageTier, custom_unit_price: float) -> float:
        """Resolve the unit price for a package tier.

        The custom price is used only for ``PackageTier.CUSTOM``; every
        other tier reads the price table and ignores it.
        """
        if tier == PackageTier.CUSTOM:
            return custom_unit_price
        return self._package_prices[tier]

    def category_style(self, category: Category) -> CategoryStyle:
        return CATEGORY_STYLES[category]

    def to_catalog_dict(self) -> dict[str, Any]:
        """Produce the option catalog for populating the form."""
        return {
            "foundation": [
                {
                    "value": ft.value,
                    "label": FOUNDATION_LABELS[ft],
                    "default_coeff": self._foundation_coeffs[ft],
                }
                for ft in FoundationType
            ],
            "basement": [
                {
                    "value": bt.value,
                    "label": BASEMENT_LABELS[bt],
                    "default_coeff": self._basement_coeffs[bt],
                }
                for bt in BasementType
            ],
            "roof": [
                {
                    "value": rt.value,
                    "label": ROOF_LABELS[rt],
                    "default_coeff": self._roof_coeffs[rt],
                }
                for rt in RoofType
            ],
            "package": [
                {
                    "value": tier.value,
                    "label": PACKAGE_LABELS[tier],
                    "unit_price": self._package_prices.get(tier),
                }
                for tier in PackageTier
            ],
            "categories": [
                {
                    "value": category.value,
                    "label": CATEGORY_STYLES[category].label,
                    "color": CATEGORY_STYLES[category].color,
                }
                for category in Category
            ],
            "floor_coeff": DEFAULT_FLOOR_COEFF,
            "terrace_coeff": DEFAULT_TERRACE_COEFF,
            "custom_unit_price": DEFAULT_CUSTOM_UNIT_PRICE,
        }
