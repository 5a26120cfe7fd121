"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from dutoan.engine import ENGINE_VERSION
from dutoan.exceptions import DutoanError
from dutoan.form import apply_edit, default_inputs
from dutoan.models.inputs import CalculationInputs  # noqa: TCH001 (FastAPI resolves at runtime)

if TYPE_CHECKING:
    from dutoan.engine import EstimatorEngine
    from dutoan.models.result import CalculationResult

logger = logging.getLogger(__name__)

_DEFAULT_CORS_ORIGINS = "http://localhost:3000"


class InputEdit(BaseModel):
    """A single form edit applied to the current inputs record."""

    inputs: CalculationInputs
    field: str
    value: Any = None


def _cors_origins_from_env() -> list[str]:
    raw = os.environ.get("DUTOAN_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _to_json(model: BaseModel) -> dict[str, Any]:
    # pydantic's JSON mode writes non-finite floats as null
    return json.loads(model.model_dump_json(by_alias=True))


def _result_payload(result: CalculationResult | None) -> dict[str, Any]:
    if result is None:
        return {"result": None, "summary": None}
    return {
        "result": _to_json(result),
        "summary": result.to_summary_dict(),
    }


def create_app(
    *,
    engine: EstimatorEngine | None = None,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built estimator engine (e.g. tests, other price
        tables). If not provided, one is created via create_default_engine
        on first request.
    cors_origins
        Allowed CORS origins. Defaults to ``DUTOAN_CORS_ORIGINS`` (comma
        separated) or ``http://localhost:3000``.
    """
    app = FastAPI(title="Dutoan", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins is not None else _cors_origins_from_env(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own engine
    app.state.engine = engine

    def _get_engine() -> EstimatorEngine:
        eng: EstimatorEngine | None = app.state.engine
        if eng is not None:
            return eng
        from dutoan.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/catalog
    # ------------------------------------------------------------------

    @app.get("/api/catalog")
    def catalog() -> dict[str, Any]:
        return _get_engine().repository.to_catalog_dict()

    # ------------------------------------------------------------------
    # GET /api/defaults
    # ------------------------------------------------------------------

    @app.get("/api/defaults")
    def defaults() -> dict[str, Any]:
        inputs = default_inputs(_get_engine().repository)
        return inputs.model_dump(mode="json", by_alias=True)

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(inputs: CalculationInputs) -> dict[str, Any]:
        return _result_payload(_get_engine().estimate(inputs))

    # ------------------------------------------------------------------
    # POST /api/inputs/edit
    # ------------------------------------------------------------------

    @app.post("/api/inputs/edit")
    def edit_inputs(edit: InputEdit) -> dict[str, Any]:
        eng = _get_engine()
        try:
            updated = apply_edit(edit.inputs, edit.field, edit.value, eng.repository)
        except DutoanError as exc:
            logger.warning("Rejected edit of %r: %s", edit.field, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        return {
            "inputs": _to_json(updated),
            **_result_payload(eng.estimate(updated)),
        }

    return app
