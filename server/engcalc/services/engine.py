from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping

from pydantic import ValidationError

from engcalc.models.calculation import (
    CalculationFailure,
    CalculationRequest,
    CalculationResult,
    CalculationSuccess,
    ErrorKind,
    FormulaDescriptor,
)
from engcalc.models.formulas import (
    ElectricalInput,
    FormulaInput,
    PercentErrorInput,
    QuadraticInput,
    ResistanceListInput,
    RiseRunInput,
    RiseSlopeInput,
    SlopeRunInput,
    TrigonometricInput,
)
from engcalc.services import registry
from engcalc.services.formulas import civil, electrical, general
from engcalc.services.formulas.base import FormulaError, FormulaOutput

logger = logging.getLogger("engcalc.engine")


@dataclass(frozen=True)
class FormulaBinding:
    input_model: type[FormulaInput]
    compute: Callable[[Any], FormulaOutput]


class FormulaService:
    """Evaluates catalog formulas locally and returns results as data, never raising."""

    _FORMULAS: dict[str, FormulaBinding] = {
        "slope-basic": FormulaBinding(RiseRunInput, civil.slope_basic),
        "grade-percent": FormulaBinding(RiseRunInput, civil.grade_percent),
        "slope-angle": FormulaBinding(RiseRunInput, civil.slope_angle),
        "horizontal-distance": FormulaBinding(RiseSlopeInput, civil.horizontal_distance),
        "vertical-rise": FormulaBinding(SlopeRunInput, civil.vertical_rise),
        "quadratic-equation": FormulaBinding(QuadraticInput, general.quadratic_equation),
        "trigonometric": FormulaBinding(TrigonometricInput, general.trigonometric),
        "percent-error": FormulaBinding(PercentErrorInput, general.percent_error),
        "ohms-law": FormulaBinding(ElectricalInput, electrical.ohms_law),
        "power-vi": FormulaBinding(ElectricalInput, electrical.power_vi),
        "resistance-series": FormulaBinding(ResistanceListInput, electrical.resistance_series),
        "resistance-parallel": FormulaBinding(ResistanceListInput, electrical.resistance_parallel),
    }

    @property
    def supported_formulas(self) -> List[str]:
        return list(self._FORMULAS)

    def supports(self, formula_id: str) -> bool:
        return formula_id in self._FORMULAS

    def list_formulas(self, category: str | None = None) -> List[FormulaDescriptor]:
        return [
            descriptor.model_copy(update={"evaluable": self.supports(descriptor.id)})
            for descriptor in registry.list_formulas(category)
        ]

    def evaluate(self, formula_id: str, inputs: Mapping[str, Any] | None = None) -> CalculationResult:
        binding = self._FORMULAS.get(formula_id)
        if binding is None:
            return self._failure(
                formula_id,
                ErrorKind.validation_failure,
                f"Unknown formula: {formula_id}",
            )

        try:
            params = binding.input_model.model_validate(dict(inputs or {}))
        except ValidationError as exc:
            return self._failure(formula_id, ErrorKind.validation_failure, _describe_validation_error(exc))

        try:
            output = binding.compute(params)
        except FormulaError as exc:
            return self._failure(formula_id, exc.kind, exc.message)

        logger.debug("formula.evaluated", extra={"formula_id": formula_id})
        return CalculationSuccess(formulaId=formula_id, data=output.data, derivation=output.derivation)

    def evaluate_request(self, request: CalculationRequest) -> CalculationResult:
        return self.evaluate(request.formulaId, request.inputs)

    def _failure(self, formula_id: str, kind: ErrorKind, message: str) -> CalculationFailure:
        logger.info(
            "formula.failed",
            extra={"formula_id": formula_id, "kind": kind.value, "reason": message},
        )
        return CalculationFailure(formulaId=formula_id, kind=kind, message=message)


def _describe_validation_error(exc: ValidationError) -> str:
    missing: list[str] = []
    problems: list[str] = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "input"
        if error.get("type") == "missing":
            missing.append(field)
        else:
            problems.append(f"{field}: {error.get('msg', 'invalid value')}")

    parts: list[str] = []
    if missing:
        parts.append(f"Missing required value(s): {', '.join(missing)}")
    parts.extend(problems)
    return "; ".join(parts)


_default_service = FormulaService()


def evaluate(formula_id: str, inputs: Mapping[str, Any] | None = None) -> CalculationResult:
    return _default_service.evaluate(formula_id, inputs)


def list_formulas(category: str | None = None) -> List[FormulaDescriptor]:
    return _default_service.list_formulas(category)
