"""
Helpers for turning API Gateway proxy events into typed request data.
"""

import base64
import binascii
import io
import json
import os
from typing import Any

from aws_lambda_powertools import Logger
from werkzeug.exceptions import RequestEntityTooLarge
from werkzeug.formparser import parse_form_data
from werkzeug.http import parse_options_header

from core.models.errors import PayloadTooLargeError, ValidationError
from core.models.upload import FilePart, FormPart, TextPart
from core.utils.constants import (
    DEFAULT_MAX_FILE_SIZE,
    ENV_MAX_FILE_SIZE,
    ERROR_CODE_INVALID_BODY,
    ERROR_CODE_INVALID_ID,
    format_file_size,
)

logger = Logger(UTC=True)

FORM_MIME_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def max_upload_size() -> int:
    """Maximum accepted request body size in bytes."""
    value = os.getenv(ENV_MAX_FILE_SIZE)
    return int(value) if value else DEFAULT_MAX_FILE_SIZE


def get_header(event: dict[str, Any], name: str) -> str | None:
    """Case-insensitive header lookup."""
    headers = event.get("headers") or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return str(value)
    return None


def parse_contact_id(event: dict[str, Any]) -> int:
    """Extract the numeric ``id`` path parameter.

    Raises:
        ValidationError: If the id is missing or not a positive integer
    """
    raw = (event.get("pathParameters") or {}).get("id")

    try:
        contact_id = int(str(raw).strip())
    except (TypeError, ValueError):
        contact_id = 0

    if contact_id <= 0:
        raise ValidationError(
            message="ID must be a valid number",
            error_code=ERROR_CODE_INVALID_ID,
            details={"id": raw},
        )

    return contact_id


def _raw_body(event: dict[str, Any]) -> bytes:
    body = event.get("body")
    if not body:
        return b""

    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValidationError(
                message="Request body is not valid base64",
                error_code=ERROR_CODE_INVALID_BODY,
            ) from exc

    return body.encode("utf-8") if isinstance(body, str) else bytes(body)


def _too_large(limit: int) -> PayloadTooLargeError:
    return PayloadTooLargeError(
        message=f"File size exceeds the maximum allowed limit of {format_file_size(limit)}",
        details={"max_bytes": limit},
    )


def parse_form_event(
    event: dict[str, Any],
    *,
    max_content_length: int | None = None,
) -> dict[str, FormPart]:
    """Decode a contact submission into form parts.

    Multipart and urlencoded bodies are parsed with werkzeug; JSON bodies
    yield text parts only. File parts with an empty filename (a file input
    left blank by the browser) are ignored.

    Raises:
        PayloadTooLargeError: If the body exceeds ``max_content_length``
        ValidationError: If the body cannot be parsed
    """
    limit = max_content_length or max_upload_size()
    raw = _raw_body(event)

    if len(raw) > limit:
        raise _too_large(limit)

    content_type = get_header(event, "Content-Type") or ""
    mimetype, _ = parse_options_header(content_type)

    if not raw:
        return {}

    if mimetype == "application/json":
        return _parse_json(raw)

    if mimetype not in FORM_MIME_TYPES:
        raise ValidationError(
            message=f"Unsupported content type '{mimetype or 'unknown'}'",
            error_code=ERROR_CODE_INVALID_BODY,
        )

    environ = {
        "REQUEST_METHOD": event.get("httpMethod") or "POST",
        "CONTENT_TYPE": content_type,
        "CONTENT_LENGTH": str(len(raw)),
        "wsgi.input": io.BytesIO(raw),
    }

    try:
        _, form, files = parse_form_data(environ, max_content_length=limit, silent=False)
    except RequestEntityTooLarge as exc:
        raise _too_large(limit) from exc
    except ValueError as exc:
        logger.warning("Malformed form body", extra={"error": str(exc)})
        raise ValidationError(
            message="Malformed form body",
            error_code=ERROR_CODE_INVALID_BODY,
        ) from exc

    parts: dict[str, FormPart] = {}

    for key, value in form.items(multi=True):
        parts[key] = TextPart(value=value)

    for key, storage in files.items(multi=True):
        if not storage.filename:
            continue

        if isinstance(parts.get(key), FilePart):
            raise ValidationError(
                message=f"Only one file may be uploaded for '{key}'",
                details={"field": key},
            )

        parts[key] = FilePart(
            stream=storage.stream,
            filename=storage.filename,
            media_type=storage.mimetype or "",
        )

    return parts


def _parse_json(raw: bytes) -> dict[str, FormPart]:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError(
            message="Invalid JSON body",
            error_code=ERROR_CODE_INVALID_BODY,
        ) from exc

    if not isinstance(payload, dict):
        raise ValidationError(
            message="JSON body must be an object",
            error_code=ERROR_CODE_INVALID_BODY,
        )

    return {
        key: TextPart(value="" if value is None else str(value))
        for key, value in payload.items()
    }
