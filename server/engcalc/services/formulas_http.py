from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from engcalc.core.config import get_settings
from engcalc.core.exceptions import AppError
from engcalc.models.calculation import (
    CalculationFailure,
    CalculationResult,
    CalculationSuccess,
    ErrorKind,
    ServiceCheck,
)
from engcalc.services.engine import FormulaService

logger = logging.getLogger("engcalc.remote")


class FormulaHttpServiceError(AppError):
    status_code = 502
    error_type = "FORMULA_HTTP_ERROR"


def _query_params(inputs: Mapping[str, Any]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for key, value in inputs.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params[key] = [str(item) for item in value]
        else:
            params[key] = str(value)
    return params


@dataclass
class FormulaHttpService:
    """Client for a remote calculation API that answers ``GET /api/<formula>``.

    Transport and HTTP failures are surfaced as ``RemoteFailure`` results; no retries.
    """

    base_url: str
    timeout: float = 5.0

    @classmethod
    def from_settings(cls) -> "FormulaHttpService":
        settings = get_settings()
        if not settings.calc_http_base_url:
            raise FormulaHttpServiceError("CALC_HTTP_BASE_URL is not configured.")
        return cls(
            base_url=settings.calc_http_base_url.rstrip("/"),
            timeout=float(settings.calc_http_timeout_sec),
        )

    def evaluate(self, formula_id: str, inputs: Mapping[str, Any] | None = None) -> CalculationResult:
        url = f"{self.base_url}/api/{formula_id}"
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url, params=_query_params(inputs or {}))
        except httpx.RequestError as exc:
            logger.warning("remote.unavailable", extra={"formula_id": formula_id, "url": url})
            return self._failure(formula_id, f"Calculation service is unavailable: {exc}")

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.is_success:
            message = f"HTTP error! status: {response.status_code}"
            if isinstance(payload, dict):
                message = _extract_message(payload) or message
            logger.warning(
                "remote.http_error",
                extra={"formula_id": formula_id, "status_code": response.status_code},
            )
            return self._failure(formula_id, message)

        if not isinstance(payload, dict):
            return self._failure(formula_id, "Calculation response was not valid JSON.")

        if payload.get("status") == "success":
            result = payload.get("result")
            return CalculationSuccess(
                formulaId=formula_id,
                data=result if isinstance(result, dict) else {"value": result},
                derivation=str(payload.get("workShown") or ""),
            )

        kind = _parse_kind(payload.get("kind"))
        return CalculationFailure(
            formulaId=formula_id,
            kind=kind,
            message=_extract_message(payload) or "Calculation failed.",
        )

    def check_health(self) -> ServiceCheck:
        return self._check("/api/health")

    def get_api_info(self) -> ServiceCheck:
        return self._check("/")

    def _check(self, endpoint: str) -> ServiceCheck:
        url = f"{self.base_url}{endpoint}"
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url, headers={"Accept": "application/json"})
            response.raise_for_status()
            return ServiceCheck(success=True, data=response.json())
        except httpx.HTTPStatusError as exc:
            return ServiceCheck(success=False, error=f"HTTP error! status: {exc.response.status_code}")
        except (httpx.RequestError, ValueError) as exc:
            return ServiceCheck(success=False, error=str(exc) or exc.__class__.__name__)

    def _failure(self, formula_id: str, message: str) -> CalculationFailure:
        return CalculationFailure(formulaId=formula_id, kind=ErrorKind.remote_failure, message=message)


def _extract_message(payload: dict[str, Any]) -> str | None:
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    error = payload.get("error")
    if isinstance(error, dict):
        return error.get("message")
    if isinstance(error, str) and error:
        return error
    return None


def _parse_kind(value: Any) -> ErrorKind:
    try:
        return ErrorKind(value)
    except ValueError:
        return ErrorKind.remote_failure


def get_formula_evaluator() -> FormulaService | FormulaHttpService:
    """Local engine or remote client, depending on ``CALC_MODE``."""
    if get_settings().uses_remote_calculator:
        return FormulaHttpService.from_settings()
    return FormulaService()
