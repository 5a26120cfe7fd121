"""Static lookup tables for the dutoan estimator."""

from dutoan.data.labels import CategoryStyle
from dutoan.data.repository import CatalogRepository

__all__ = [
    "CatalogRepository",
    "CategoryStyle",
]
