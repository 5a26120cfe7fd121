"""Estimate output models for the dutoan estimator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dutoan.models.enums import Category


class ComponentBreakdown(BaseModel):
    """Cost share of a single structural category."""

    category: Category
    label: str
    area: float
    cost: float
    color: str
    percent_of_total: float = Field(default=0.0, alias="percentOfTotal")

    model_config = ConfigDict(populate_by_name=True)


class CalculationResult(BaseModel):
    """Complete output of one estimator run.

    The breakdown holds one entry per ``Category`` in display order; their
    costs sum to ``total_cost``. A result is rebuilt from scratch on every
    input change and carries no identity of its own.
    """

    base_area: float = Field(alias="baseArea")
    total_weighted_area: float = Field(alias="totalWeightedArea")
    unit_price: float = Field(alias="unitPrice")
    total_cost: float = Field(alias="totalCost")
    breakdown: list[ComponentBreakdown]

    model_config = ConfigDict(populate_by_name=True)

    def cost_of(self, category: Category) -> float:
        """Return the breakdown cost for ``category`` (0 if absent)."""
        for item in self.breakdown:
            if item.category == category:
                return item.cost
        return 0.0

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for the display layer.

        Amounts are pre-formatted (whole đồng, m²) and breakdown shares are
        rounded half up to whole percent, the way the result card shows them.
        Whole values are None when an amount is not finite.
        """
        from dutoan.formatting import (
            format_area,
            format_currency,
            format_unit_price,
            round_half_up,
        )

        return {
            "total_cost": round_half_up(self.total_cost),
            "total_cost_formatted": format_currency(self.total_cost),
            "base_area_formatted": format_area(self.base_area),
            "total_weighted_area_formatted": format_area(self.total_weighted_area),
            "unit_price_formatted": format_unit_price(self.unit_price),
            "breakdown": [
                {
                    "category": item.category.value,
                    "label": item.label,
                    "color": item.color,
                    "cost_formatted": format_currency(item.cost),
                    "area_formatted": format_area(item.area),
                    "percent": round_half_up(item.percent_of_total),
                }
                for item in self.breakdown
                if item.cost != 0
            ],
        }
