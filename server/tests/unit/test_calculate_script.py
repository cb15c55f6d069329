import json

import pytest
import respx
from httpx import Response

from engcalc.core.config import AppSettings
from server.scripts import calculate as script


def test_parse_assignments_collects_repeated_keys() -> None:
    inputs = script.parse_assignments(["resistances=10", "resistances=20", "resistances=30", "mode=x=y"])

    assert inputs == {"resistances": ["10", "20", "30"], "mode": "x=y"}


def test_parse_assignments_rejects_bare_values() -> None:
    with pytest.raises(ValueError):
        script.parse_assignments(["rise"])


def test_main_prints_work_shown(capsys) -> None:
    exit_code = script.main(["grade-percent", "rise=10", "run=100", "--mode", "local"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Grade Percentage Calculation:" in captured.out
    assert '"gradePercent": 10.0' in captured.out


def test_main_reports_failures(capsys) -> None:
    exit_code = script.main(["grade-percent", "rise=10", "run=0", "--mode", "local"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "DivisionByZero: Run cannot be zero" in captured.err


def test_main_json_output(capsys) -> None:
    exit_code = script.main(["ohms-law", "voltage=12", "resistance=4", "--mode", "local", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["status"] == "success"
    assert payload["data"]["current"] == 3.0


def test_main_lists_catalog(capsys) -> None:
    exit_code = script.main(["--list", "electrical"])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert any(line.startswith("* ohms-law") for line in lines)
    assert any(line.startswith("  capacitance") for line in lines)


def test_main_requires_formula(capsys) -> None:
    assert script.main([]) == 2


def test_main_http_mode_without_base_url(monkeypatch) -> None:
    monkeypatch.setattr(
        "engcalc.services.formulas_http.get_settings", lambda: AppSettings(calc_http_base_url=None)
    )

    assert script.main(["grade-percent", "rise=1", "run=2", "--mode", "http"]) == 2


@respx.mock
def test_main_health_checks_remote_api(monkeypatch, respx_mock, capsys) -> None:
    settings = AppSettings(calc_http_base_url="http://calculator.local")
    monkeypatch.setattr("engcalc.services.formulas_http.get_settings", lambda: settings)
    respx_mock.get("http://calculator.local/api/health").mock(return_value=Response(200, json={"status": "ok"}))
    respx_mock.get("http://calculator.local/").mock(return_value=Response(200, json={"name": "calc"}))

    exit_code = script.main(["--health"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert payload["health"]["data"] == {"status": "ok"}
    assert payload["info"]["data"] == {"name": "calc"}
