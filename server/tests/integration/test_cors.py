from fastapi.testclient import TestClient

from engcalc.main import create_app


def test_cors_allows_configured_origin() -> None:
    app = create_app()
    client = TestClient(app)

    response = client.options(
        "/api/grade-percent",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_cors_headers_on_formula_response() -> None:
    client = TestClient(create_app())

    response = client.get(
        "/api/ohms-law",
        params={"voltage": "12", "resistance": "4"},
        headers={"Origin": "http://localhost:5173"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_cors_ignores_unknown_origin() -> None:
    client = TestClient(create_app())

    response = client.get("/health", headers={"Origin": "https://elsewhere.example.com"})

    assert "access-control-allow-origin" not in response.headers
