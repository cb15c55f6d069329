from fastapi.testclient import TestClient

from engcalc.main import create_app


def create_test_client() -> TestClient:
    app = create_app()
    return TestClient(app)


def test_formula_endpoint_returns_result_and_work_shown() -> None:
    client = create_test_client()

    response = client.get("/api/grade-percent", params={"rise": "10", "run": "100"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "success"
    assert payload["result"] == {
        "gradePercent": 10.0,
        "slope": 0.1,
        "angle": 5.71,
        "angleRadians": 0.0997,
    }
    assert payload["workShown"].startswith("Grade Percentage Calculation:")
    assert response.headers["X-Request-ID"]


def test_formula_endpoint_returns_error_status_for_domain_failure() -> None:
    client = create_test_client()

    response = client.get("/api/grade-percent", params={"rise": "10", "run": "0"})

    assert response.status_code == 400
    assert response.json() == {
        "status": "error",
        "kind": "DivisionByZero",
        "message": "Run cannot be zero (division by zero)",
    }


def test_formula_endpoint_reports_missing_inputs() -> None:
    client = create_test_client()

    response = client.get("/api/quadratic-equation", params={"a": "1", "b": "2"})

    assert response.status_code == 400
    payload = response.json()
    assert payload["kind"] == "ValidationFailure"
    assert payload["message"] == "Missing required value(s): c"


def test_slope_alias_matches_remote_api() -> None:
    client = create_test_client()

    response = client.get("/api/slope", params={"rise": "1", "run": "4"})

    assert response.status_code == 200
    assert response.json()["result"]["slope"] == 0.25


def test_repeated_query_keys_become_lists() -> None:
    client = create_test_client()

    response = client.get("/api/resistance-series?resistances=10&resistances=20&resistances=30")

    assert response.status_code == 200
    assert response.json()["result"]["totalResistance"] == 60


def test_unknown_formula_returns_not_found_envelope() -> None:
    client = create_test_client()

    response = client.get("/api/beam-deflection", params={"load": "1"})

    assert response.status_code == 404
    payload = response.json()
    assert payload["error"]["type"] == "FORMULA_NOT_FOUND"
    assert payload["error"]["traceId"] == response.headers["X-Request-ID"]


def test_list_formulas_by_category() -> None:
    client = create_test_client()

    response = client.get("/api/formulas", params={"category": "electrical"})

    assert response.status_code == 200
    descriptors = {item["id"]: item for item in response.json()}
    assert descriptors["ohms-law"]["evaluable"] is True
    assert descriptors["ohms-law"]["variables"] == ["voltage", "current", "resistance"]
    assert descriptors["impedance"]["evaluable"] is False


def test_get_formula_descriptor() -> None:
    client = create_test_client()

    found = client.get("/api/formulas/trigonometric")
    missing = client.get("/api/formulas/warp-drive")

    assert found.status_code == 200
    assert found.json()["variables"] == ["angle", "angle_unit"]
    assert found.json()["evaluable"] is True
    assert missing.status_code == 404


def test_list_categories() -> None:
    client = create_test_client()

    response = client.get("/api/categories")

    assert response.status_code == 200
    assert [item["id"] for item in response.json()][:2] == ["civil", "chemical"]
