"""Unit prices per package tier, in VND per m² of weighted area."""

from __future__ import annotations

from dutoan.models.enums import PackageTier

# CUSTOM has no table price; the user supplies one.
PACKAGE_PRICES: dict[PackageTier, float] = {
    PackageTier.ECONOMY: 5_200_000.0,
    PackageTier.STANDARD: 6_500_000.0,
    PackageTier.PREMIUM: 8_000_000.0,
}

DEFAULT_CUSTOM_UNIT_PRICE = 5_000_000.0
