"""Factory functions for creating pre-configured EstimatorEngine instances."""

from __future__ import annotations

from dutoan.data.repository import CatalogRepository
from dutoan.engine import EstimatorEngine


def create_default_engine() -> EstimatorEngine:
    """Create an EstimatorEngine wired up with the built-in catalog.

    This is the recommended way to create an engine for typical usage: it
    uses the default coefficient and package price tables so callers don't
    need to understand the internal wiring.

    Example::

        from dutoan import create_default_engine, default_inputs

        engine = create_default_engine()
        result = engine.estimate(default_inputs())
    """
    return EstimatorEngine(CatalogRepository())
