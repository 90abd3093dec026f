"""
Error handling tests: the centralized responders and their status mapping.
"""

from unittest.mock import patch

from pymongo.errors import ServerSelectionTimeoutError

from adapters import mongo_adapter
from app.exceptions import (
    ConflictError,
    ForbiddenError,
    MethodNotSupportedError,
    NotFoundError,
    ServiceError,
    ServiceValidationError,
    UnauthorizedError,
    comment_not_found,
    dish_not_found,
)
from test_fixtures import UTHAPIZZA, auth_header


def test_exception_status_codes():
    assert NotFoundError().http_status == 404
    assert ForbiddenError().http_status == 403
    assert UnauthorizedError().http_status == 401
    assert ConflictError().http_status == 409
    assert ServiceValidationError().http_status == 400
    assert ServiceError().http_status == 500


def test_not_found_messages_are_complete():
    assert str(dish_not_found("42")) == "Dish 42 not found"
    assert comment_not_found("7").to_dict() == {
        "code": "NOT_FOUND",
        "message": "Comment 7 not found",
        "details": {"comment_id": "7"},
    }


def test_method_not_supported_message():
    exc = MethodNotSupportedError("PUT", "/dishes/1/comments")
    assert str(exc) == "PUT operation not supported on /dishes/1/comments"
    assert exc.http_status == 403


def test_store_failure_becomes_500(client, dish_repo):
    with patch.object(
        dish_repo, "get_all_expanded", side_effect=ServerSelectionTimeoutError("no servers")
    ):
        r = client.get("/dishes")

    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "timestamp" in body


def test_store_failure_during_write_becomes_500(client, admin, dish_repo):
    with patch.object(dish_repo, "create", side_effect=ServerSelectionTimeoutError("down")):
        r = client.post("/dishes", json=UTHAPIZZA, headers=auth_header(admin))

    assert r.status_code == 500


def test_error_body_shape_for_service_errors(client):
    r = client.get("/dishes/unknown/comments")

    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"] == {
        "code": "NOT_FOUND",
        "message": "Dish unknown not found",
        "details": {"dish_id": "unknown"},
    }


def test_unknown_route_is_json_404(client):
    r = client.get("/plates")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_unsupported_http_method_is_405(client):
    r = client.patch("/dishes")
    assert r.status_code == 405


def test_responses_carry_request_id(client):
    r = client.get("/dishes")
    assert r.headers["x-request-id"]
    assert "x-process-time" in r.headers


def test_health_check(client):
    with patch.object(mongo_adapter, "ping", return_value=True):
        r = client.get("/health-check")

    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["mongodb"] == "up"


def test_health_check_degraded(client):
    with patch.object(mongo_adapter, "ping", return_value=False):
        r = client.get("/health-check")

    assert r.json()["status"] == "degraded"
