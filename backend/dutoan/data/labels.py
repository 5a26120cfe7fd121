"""Display labels and colours for the estimator.

Labels are the Vietnamese strings shown on the form selectors and in the
breakdown legend. Colours are fixed per category so the breakdown chart
stays stable across recomputations.
"""

from __future__ import annotations

from dataclasses import dataclass

from dutoan.models.enums import (
    BasementType,
    Category,
    FoundationType,
    PackageTier,
    RoofType,
)


@dataclass(frozen=True)
class CategoryStyle:
    """Legend label and chart colour of a breakdown category."""

    label: str
    color: str


FOUNDATION_LABELS: dict[FoundationType, str] = {
    FoundationType.SINGLE: "Móng đơn",
    FoundationType.PILE: "Móng cọc",
    FoundationType.STRIP: "Móng băng",
    FoundationType.RAFT: "Móng bè",
}

BASEMENT_LABELS: dict[BasementType, str] = {
    BasementType.NONE: "Không có hầm",
    BasementType.SEMI: "Bán hầm",
    BasementType.ONE_LEVEL: "Hầm 1 tầng",
    BasementType.MULTI_LEVEL: "Hầm nhiều tầng",
}

ROOF_LABELS: dict[RoofType, str] = {
    RoofType.CONCRETE: "Mái bê tông cốt thép",
    RoofType.METAL_SHEET: "Mái tôn",
    RoofType.TILE_TRUSS: "Mái ngói kèo thép",
    RoofType.TILE_CONCRETE: "Mái ngói đổ bê tông",
}

PACKAGE_LABELS: dict[PackageTier, str] = {
    PackageTier.ECONOMY: "Gói tiết kiệm",
    PackageTier.STANDARD: "Gói tiêu chuẩn",
    PackageTier.PREMIUM: "Gói cao cấp",
    PackageTier.CUSTOM: "Tùy chỉnh",
}

CATEGORY_STYLES: dict[Category, CategoryStyle] = {
    Category.FOUNDATION: CategoryStyle("Phần móng", "#7b1016"),
    Category.BASEMENT: CategoryStyle("Tầng hầm", "#a8323a"),
    Category.GROUND_FLOOR: CategoryStyle("Tầng trệt", "#1e293b"),
    Category.UPPER_FLOORS: CategoryStyle("Các tầng lầu", "#475569"),
    Category.TERRACE: CategoryStyle("Sân thượng", "#94a3b8"),
    Category.ROOF: CategoryStyle("Phần mái", "#d4a373"),
}
