from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from engcalc.core.config import get_settings
from engcalc.core.exceptions import FormulaNotFoundError
from engcalc.models.calculation import CalculationCategory, FormulaDescriptor
from engcalc.services import registry
from engcalc.services.engine import FormulaService

router = APIRouter(prefix="/api", tags=["formulas"])

# Legacy endpoint names still called by existing frontends.
ENDPOINT_ALIASES = {"slope": "slope-basic"}


def get_formula_service() -> FormulaService:
    return FormulaService()


def _collect_inputs(request: Request) -> dict[str, Any]:
    inputs: dict[str, Any] = {}
    for key in request.query_params.keys():
        values = request.query_params.getlist(key)
        inputs[key] = values if len(values) > 1 else values[0]
    return inputs


@router.get("/health")
async def api_health(service: FormulaService = Depends(get_formula_service)) -> dict[str, Any]:
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.api_title,
        "version": settings.api_version,
        "formulas": len(service.supported_formulas),
    }


@router.get("/categories", response_model=List[CalculationCategory])
async def list_categories() -> List[CalculationCategory]:
    return registry.list_categories()


@router.get("/formulas", response_model=List[FormulaDescriptor])
async def list_formulas(
    category: str | None = Query(None, description="Category identifier, e.g. civil or electrical."),
    service: FormulaService = Depends(get_formula_service),
) -> List[FormulaDescriptor]:
    return service.list_formulas(category)


@router.get("/formulas/{formula_id}", response_model=FormulaDescriptor)
async def get_formula(
    formula_id: str,
    service: FormulaService = Depends(get_formula_service),
) -> FormulaDescriptor:
    descriptor = registry.get_formula(formula_id)
    if descriptor is None:
        raise FormulaNotFoundError(f"Unknown formula: {formula_id}")
    return descriptor.model_copy(update={"evaluable": service.supports(formula_id)})


@router.get("/{formula_id}")
async def evaluate_formula(
    formula_id: str,
    request: Request,
    service: FormulaService = Depends(get_formula_service),
) -> JSONResponse:
    resolved_id = ENDPOINT_ALIASES.get(formula_id, formula_id)
    if not service.supports(resolved_id):
        raise FormulaNotFoundError(f"Unknown formula: {formula_id}")

    result = service.evaluate(resolved_id, _collect_inputs(request))
    status_code = 200 if result.ok else 400
    return JSONResponse(status_code=status_code, content=result.to_wire())
