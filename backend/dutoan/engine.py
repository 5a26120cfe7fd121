"""Core estimation engine for the dutoan construction cost estimator.

The EstimatorEngine implements a weighted-area methodology:

1. **Base area** — footprint ``width * length``.
2. **Category areas** — every structural category counts as a percentage of
   the base area: foundation, basement (zero without one), the ground floor
   at a flat 100 %, each floor above it at the floor coefficient, the
   terrace (only when present) and the roof.
3. **Weighted area** — the sum of the category areas.
4. **Unit price** — the package tier's price per m², or the user's own
   price for the custom tier.
5. **Breakdown** — the total cost split across categories in proportion to
   their share of the weighted area.

Nothing is rounded here; whole-đồng rounding is a formatting concern.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dutoan.data.coefficients import GROUND_FLOOR_COEFF
from dutoan.models.enums import BasementType, Category
from dutoan.models.result import CalculationResult, ComponentBreakdown

if TYPE_CHECKING:
    from dutoan.data.repository import CatalogRepository
    from dutoan.models.inputs import CalculationInputs

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class EstimatorEngine:
    """Converts a CalculationInputs record into a CalculationResult.

    Args:
        repository: Catalog providing package prices and category styles.

    Example::

        from dutoan.data.repository import CatalogRepository

        engine = EstimatorEngine(CatalogRepository())
        result = engine.estimate(inputs)
        if result is None:
            ...  # form not filled in yet
    """

    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> CatalogRepository:
        return self._repository

    def estimate(self, inputs: CalculationInputs) -> CalculationResult | None:
        """Compute a result, or return None while the geometry is incomplete.

        None is the explicit empty state (width, length or floor count not
        positive) and is not an error.
        """
        if not inputs.is_complete:
            logger.info(
                "Incomplete inputs (width=%s, length=%s, floors=%s); no estimate",
                inputs.width,
                inputs.length,
                inputs.num_floors,
            )
            return None
        return self.compute(inputs)

    def compute(self, inputs: CalculationInputs) -> CalculationResult:
        """Produce the weighted area, total cost and breakdown for ``inputs``.

        Callers are expected to check ``inputs.is_complete`` first (see
        ``estimate``); values are otherwise used as given.
        """
        base_area = inputs.width * inputs.length

        percentages = self._category_percentages(inputs)
        areas = {
            category: base_area * pct / 100.0
            for category, pct in percentages.items()
        }
        total_weighted_area = sum(areas.values())

        unit_price = self._repository.unit_price(
            inputs.package_tier, inputs.custom_unit_price,
        )
        total_cost = total_weighted_area * unit_price

        breakdown = self._generate_breakdown(areas, total_weighted_area, total_cost)

        logger.debug(
            "Estimated %.2f m2 base, %.2f m2 weighted at %.0f/m2 -> %.0f",
            base_area,
            total_weighted_area,
            unit_price,
            total_cost,
        )

        return CalculationResult(
            base_area=base_area,
            total_weighted_area=total_weighted_area,
            unit_price=unit_price,
            total_cost=total_cost,
            breakdown=breakdown,
        )

    @staticmethod
    def _category_percentages(inputs: CalculationInputs) -> dict[Category, float]:
        """Percent of base area contributed by each category, in display order."""
        basement_pct = (
            0.0 if inputs.basement == BasementType.NONE else inputs.basement_coeff
        )
        terrace_pct = inputs.terrace_coeff if inputs.has_terrace else 0.0
        upper_floors = max(inputs.num_floors - 1, 0)

        return {
            Category.FOUNDATION: inputs.foundation_coeff,
            Category.BASEMENT: basement_pct,
            Category.GROUND_FLOOR: GROUND_FLOOR_COEFF,
            Category.UPPER_FLOORS: upper_floors * inputs.floor_coeff,
            Category.TERRACE: terrace_pct,
            Category.ROOF: inputs.roof_coeff,
        }

    def _generate_breakdown(
        self,
        areas: dict[Category, float],
        total_weighted_area: float,
        total_cost: float,
    ) -> list[ComponentBreakdown]:
        """Split the total cost across categories by weighted-area share."""
        breakdown: list[ComponentBreakdown] = []
        for category, area in areas.items():
            share = area / total_weighted_area if total_weighted_area != 0 else 0.0
            style = self._repository.category_style(category)
            breakdown.append(
                ComponentBreakdown(
                    category=category,
                    label=style.label,
                    area=area,
                    cost=total_cost * share,
                    color=style.color,
                    percent_of_total=share * 100.0,
                )
            )
        return breakdown
