from flask.testing import FlaskClient


def test_ping_returns_pong(client: FlaskClient):
    response = client.get("/api/ping")

    assert response.status_code == 200
    assert response.json == {"message": "pong"}


def test_currencies_lists_dropdown_labels(client: FlaskClient):
    response = client.get("/api/currencies")

    assert response.status_code == 200
    assert response.json == {"currencies": ["USD", "EUR", "GBP", "JPY", "CAD", "AUD"]}
