from __future__ import annotations

import httpx
import pytest
import respx
from httpx import Response

from engcalc.core.config import AppSettings
from engcalc.models.calculation import ErrorKind
from engcalc.services.engine import FormulaService
from engcalc.services.formulas_http import (
    FormulaHttpService,
    FormulaHttpServiceError,
    get_formula_evaluator,
)


@respx.mock
def test_evaluate_returns_success(respx_mock):
    service = FormulaHttpService(base_url="http://calculator.local", timeout=1.5)
    route = respx_mock.get("http://calculator.local/api/grade-percent").mock(
        return_value=Response(
            200,
            json={
                "status": "success",
                "result": {"gradePercent": 10.0, "slope": 0.1},
                "workShown": "Grade Percentage Calculation:",
            },
        )
    )

    result = service.evaluate("grade-percent", {"rise": 10, "run": 100})

    assert result.ok
    assert result.data == {"gradePercent": 10.0, "slope": 0.1}
    assert result.derivation == "Grade Percentage Calculation:"
    params = route.calls.last.request.url.params
    assert params["rise"] == "10"
    assert params["run"] == "100"


@respx.mock
def test_evaluate_sends_lists_as_repeated_params(respx_mock):
    service = FormulaHttpService(base_url="http://calculator.local")
    route = respx_mock.get("http://calculator.local/api/resistance-series").mock(
        return_value=Response(200, json={"status": "success", "result": {"totalResistance": 60}, "workShown": ""})
    )

    service.evaluate("resistance-series", {"resistances": [10, 20, 30], "unused": None})

    params = route.calls.last.request.url.params
    assert params.get_list("resistances") == ["10", "20", "30"]
    assert "unused" not in params


@respx.mock
def test_evaluate_maps_error_payload_to_failure(respx_mock):
    service = FormulaHttpService(base_url="http://calculator.local")
    respx_mock.get("http://calculator.local/api/grade-percent").mock(
        return_value=Response(
            200,
            json={"status": "error", "kind": "DivisionByZero", "message": "Run cannot be zero (division by zero)"},
        )
    )

    result = service.evaluate("grade-percent", {"rise": 10, "run": 0})

    assert not result.ok
    assert result.kind is ErrorKind.division_by_zero
    assert result.message == "Run cannot be zero (division by zero)"


@respx.mock
def test_evaluate_surfaces_http_status_as_failure(respx_mock):
    service = FormulaHttpService(base_url="http://calculator.local")
    respx_mock.get("http://calculator.local/api/ohms-law").mock(return_value=Response(500, text="boom"))

    result = service.evaluate("ohms-law", {"voltage": 12})

    assert result.kind is ErrorKind.remote_failure
    assert result.message == "HTTP error! status: 500"


@respx.mock
def test_evaluate_prefers_error_message_from_body(respx_mock):
    service = FormulaHttpService(base_url="http://calculator.local")
    respx_mock.get("http://calculator.local/api/ohms-law").mock(
        return_value=Response(400, json={"status": "error", "message": "Please provide exactly 2 of the 3 values"})
    )

    result = service.evaluate("ohms-law", {"voltage": 12})

    assert result.kind is ErrorKind.remote_failure
    assert result.message == "Please provide exactly 2 of the 3 values"


@respx.mock
def test_evaluate_rejects_non_json_success(respx_mock):
    service = FormulaHttpService(base_url="http://calculator.local")
    respx_mock.get("http://calculator.local/api/ohms-law").mock(return_value=Response(200, text="<html>"))

    result = service.evaluate("ohms-law", {"voltage": 12, "current": 2})

    assert result.kind is ErrorKind.remote_failure
    assert "not valid JSON" in result.message


def test_evaluate_handles_network_error(monkeypatch):
    service = FormulaHttpService(base_url="http://calculator.local")

    def fail_request(*args, **kwargs):
        raise httpx.ConnectError("unreachable")

    monkeypatch.setattr(httpx, "Client", lambda *args, **kwargs: DummyClient(fail_request))

    result = service.evaluate("grade-percent", {"rise": 1, "run": 2})

    assert result.kind is ErrorKind.remote_failure
    assert "unavailable" in result.message


class DummyClient:
    def __init__(self, callback):
        self._callback = callback

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def get(self, *args, **kwargs):
        return self._callback(*args, **kwargs)


@respx.mock
def test_check_health(respx_mock):
    service = FormulaHttpService(base_url="http://calculator.local")
    respx_mock.get("http://calculator.local/api/health").mock(return_value=Response(200, json={"status": "ok"}))

    check = service.check_health()

    assert check.success is True
    assert check.data == {"status": "ok"}


@respx.mock
def test_get_api_info_reports_http_failure(respx_mock):
    service = FormulaHttpService(base_url="http://calculator.local")
    respx_mock.get("http://calculator.local/").mock(return_value=Response(503))

    check = service.get_api_info()

    assert check.success is False
    assert check.error == "HTTP error! status: 503"


def test_from_settings_requires_base_url(monkeypatch):
    monkeypatch.setattr(
        "engcalc.services.formulas_http.get_settings", lambda: AppSettings(calc_http_base_url=None)
    )

    with pytest.raises(FormulaHttpServiceError):
        FormulaHttpService.from_settings()


def test_from_settings_uses_timeout(monkeypatch):
    settings = AppSettings(calc_http_base_url="http://calculator.local/", calc_http_timeout_sec=7.5)
    monkeypatch.setattr("engcalc.services.formulas_http.get_settings", lambda: settings)

    service = FormulaHttpService.from_settings()

    assert service.base_url == "http://calculator.local"
    assert service.timeout == 7.5


@pytest.mark.parametrize(("mode", "expected"), [("local", FormulaService), ("http", FormulaHttpService)])
def test_get_formula_evaluator_follows_calc_mode(monkeypatch, mode, expected):
    settings = AppSettings(calc_mode=mode, calc_http_base_url="http://calculator.local")
    monkeypatch.setattr("engcalc.services.formulas_http.get_settings", lambda: settings)

    assert isinstance(get_formula_evaluator(), expected)
