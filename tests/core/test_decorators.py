import json
from http import HTTPStatus
from types import SimpleNamespace
from typing import Any, cast

import pytest

from core.models.errors import ConflictError, DatabaseError, NotFoundError
from core.utils.decorators import api_gateway_handler
from core.utils.response import JsonDict, ResponseBuilder


def parse_body(resp: dict[str, Any]) -> dict[str, Any]:
    body = resp.get("body")
    if not body:
        return {}
    return cast(dict[str, Any], json.loads(body))


def raising_handler(exc: BaseException):
    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise exc

    return handler


CONTEXT = SimpleNamespace(aws_request_id="req-1")


def test_success_passes_through() -> None:
    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        return ResponseBuilder.ok({"success": True}, request_id=context.aws_request_id)

    resp = handler({}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.OK
    assert parse_body(resp)["request_id"] == "req-1"


def test_options_preflight() -> None:
    resp = raising_handler(RuntimeError("never called"))({"httpMethod": "OPTIONS"}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.NO_CONTENT
    assert resp["body"] == ""
    assert "Access-Control-Allow-Methods" in resp["headers"]


@pytest.mark.parametrize(
    "exc,status,code",
    [
        (ConflictError(message="Contact or email already exists"), HTTPStatus.BAD_REQUEST, "DUPLICATE_CONTACT"),
        (NotFoundError(message="Contact not found"), HTTPStatus.NOT_FOUND, "NOT_FOUND"),
        (DatabaseError(message="Unable to save contact"), HTTPStatus.INTERNAL_SERVER_ERROR, "DATABASE_ERROR"),
    ],
)
def test_domain_errors_map_to_status(exc, status, code) -> None:
    resp = raising_handler(exc)({}, CONTEXT)
    parsed = parse_body(resp)

    assert resp["statusCode"] == status
    assert parsed["error"] == code
    assert parsed["message"] == exc.message
    assert parsed["request_id"] == "req-1"


@pytest.mark.parametrize(
    "exc,status",
    [
        (ValueError("boom"), HTTPStatus.BAD_REQUEST),
        (KeyError("name"), HTTPStatus.BAD_REQUEST),
        (PermissionError("nope"), HTTPStatus.FORBIDDEN),
        (FileNotFoundError("gone"), HTTPStatus.NOT_FOUND),
        (MemoryError(), HTTPStatus.REQUEST_ENTITY_TOO_LARGE),
        (TimeoutError(), HTTPStatus.GATEWAY_TIMEOUT),
        (ConnectionError("refused"), HTTPStatus.SERVICE_UNAVAILABLE),
        (RuntimeError("kaboom"), HTTPStatus.INTERNAL_SERVER_ERROR),
    ],
)
def test_unexpected_errors_map_to_status(exc, status) -> None:
    resp = raising_handler(exc)({}, CONTEXT)

    assert resp["statusCode"] == status
    assert parse_body(resp)["success"] is False


def test_internal_error_message_is_generic() -> None:
    resp = raising_handler(RuntimeError("password=hunter2"))({}, CONTEXT)

    assert "hunter2" not in resp["body"]


def test_friendly_messages_are_preserved() -> None:
    resp = raising_handler(ValueError("Invalid contact payload"))({}, CONTEXT)

    assert parse_body(resp)["message"] == "Invalid contact payload"
