import pytest
from sqlalchemy.exc import IntegrityError

from portfolio_api import create_app
from portfolio_api.errors import ConflictError, resolve_status


@pytest.fixture
def failing_app():
    app = create_app("testing")

    def raise_value_error():
        raise ValueError("secret internal detail")

    def raise_lookup_error():
        raise KeyError("missing")

    def raise_integrity_error():
        raise IntegrityError("INSERT ...", {}, Exception("duplicate key"))

    def raise_runtime_error():
        raise RuntimeError("database password is hunter2")

    def raise_conflict():
        raise ConflictError()

    app.add_url_rule("/boom/value", view_func=raise_value_error)
    app.add_url_rule("/boom/lookup", view_func=raise_lookup_error)
    app.add_url_rule("/boom/integrity", view_func=raise_integrity_error)
    app.add_url_rule("/boom/runtime", view_func=raise_runtime_error)
    app.add_url_rule("/boom/conflict", view_func=raise_conflict)
    return app


@pytest.mark.parametrize(
    "path, status_code, message",
    [
        ("/boom/value", 400, "Invalid request parameters"),
        ("/boom/lookup", 404, "Resource not found"),
        ("/boom/integrity", 409, "Invalid operation"),
        ("/boom/runtime", 500, "An error occurred while processing your request"),
        ("/boom/conflict", 409, "Invalid operation"),
    ],
)
def test_uncaught_exceptions_map_to_status_table(failing_app, path, status_code, message):
    with failing_app.app_context():
        response = failing_app.test_client().get(path)

    assert response.status_code == status_code
    error = response.get_json()["error"]
    assert error == {
        "message": message,
        "statusCode": status_code,
        "timestamp": error["timestamp"],
        "path": path,
    }


def test_exception_detail_is_not_echoed(failing_app):
    with failing_app.app_context():
        response = failing_app.test_client().get("/boom/runtime")

    assert b"hunter2" not in response.data


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.get_json()["error"]["message"] == "Not Found"


def test_method_not_allowed(client):
    response = client.patch("/api/items")
    assert response.status_code == 405


def test_resolve_status_prefers_first_match():
    assert resolve_status(PermissionError()) == (403, "Access denied")
    assert resolve_status(Exception()) == (500, "An error occurred while processing your request")
