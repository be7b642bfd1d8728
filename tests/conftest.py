"""
Pytest configuration and fixtures for contact-service tests.
Provides a temporary upload directory, an in-memory SQLite store and
API Gateway event builders.
"""

import base64
from collections.abc import Callable
import json
import os
from types import SimpleNamespace
from typing import Any

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "contact-service")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "ContactService")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_DEV", "false")

from core.infrastructure.adapters.filesystem_adapter import FilesystemAdapter  # noqa: E402
from core.infrastructure.adapters.sql_adapter import SqlAdapter  # noqa: E402
from core.infrastructure.local.disk_image_storage import LocalDiskImageStorage  # noqa: E402
from core.infrastructure.sql.sql_contact_repository import SqlContactRepository  # noqa: E402
from core.services.contact_coordinator import ContactCoordinator  # noqa: E402

SAMPLE_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)

MULTIPART_BOUNDARY = "----ContactServiceTestBoundary"

# (filename, content, content type)
FileField = tuple[str, bytes, str]


def encode_multipart(
    fields: dict[str, str],
    files: dict[str, FileField] | None = None,
) -> tuple[bytes, str]:
    """Encode text fields and files as a multipart/form-data body."""
    chunks: list[bytes] = []

    for name, value in fields.items():
        chunks.append(
            (
                f"--{MULTIPART_BOUNDARY}\r\n"
                f'Content-Disposition: form-data; name="{name}"\r\n\r\n'
                f"{value}\r\n"
            ).encode("utf-8")
        )

    for name, (filename, content, content_type) in (files or {}).items():
        chunks.append(
            (
                f"--{MULTIPART_BOUNDARY}\r\n"
                f'Content-Disposition: form-data; name="{name}"; filename="{filename}"\r\n'
                f"Content-Type: {content_type}\r\n\r\n"
            ).encode("utf-8")
            + content
            + b"\r\n"
        )

    chunks.append(f"--{MULTIPART_BOUNDARY}--\r\n".encode("utf-8"))

    return b"".join(chunks), f"multipart/form-data; boundary={MULTIPART_BOUNDARY}"


@pytest.fixture
def sample_image_binary() -> bytes:
    """1x1 PNG image."""
    return base64.b64decode(SAMPLE_PNG_BASE64)


@pytest.fixture
def upload_root(tmp_path, monkeypatch):
    root = tmp_path / "uploads"
    monkeypatch.setenv("UPLOAD_ROOT", str(root))
    return root


@pytest.fixture
def images_dir(upload_root):
    return upload_root / "images"


@pytest.fixture
def storage(upload_root) -> LocalDiskImageStorage:
    return LocalDiskImageStorage(FilesystemAdapter(upload_root))


@pytest.fixture
def sql_adapter():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    yield SqlAdapter(engine=engine)
    engine.dispose()


@pytest.fixture
def repository(sql_adapter) -> SqlContactRepository:
    return SqlContactRepository(sql_adapter)


@pytest.fixture
def coordinator(repository, storage) -> ContactCoordinator:
    return ContactCoordinator(repository=repository, storage=storage)


@pytest.fixture
def contact_payload() -> dict[str, str]:
    return {
        "name": "João da Silva",
        "contact": "123456789",
        "email": "joao@teste.com",
        "picture": "https://images.example.com/joao.png",
    }


@pytest.fixture
def database_url(tmp_path, monkeypatch) -> str:
    """Point handlers at a fresh SQLite file for this test."""
    url = f"sqlite:///{tmp_path / 'contacts.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    return url


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture
def multipart_event() -> Callable[..., dict[str, Any]]:
    """Build an API Gateway event carrying a base64 multipart body."""

    def _build(
        fields: dict[str, str],
        files: dict[str, FileField] | None = None,
        *,
        method: str = "POST",
        path_parameters: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        body, content_type = encode_multipart(fields, files)
        return {
            "httpMethod": method,
            "path": "/api/contacts",
            "headers": {"Content-Type": content_type},
            "pathParameters": path_parameters,
            "body": base64.b64encode(body).decode("ascii"),
            "isBase64Encoded": True,
        }

    return _build


@pytest.fixture
def json_event() -> Callable[..., dict[str, Any]]:
    """Build an API Gateway event carrying a JSON body."""

    def _build(
        payload: dict[str, Any],
        *,
        method: str = "POST",
        path_parameters: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        return {
            "httpMethod": method,
            "path": "/api/contacts",
            "headers": {"content-type": "application/json"},
            "pathParameters": path_parameters,
            "body": json.dumps(payload),
            "isBase64Encoded": False,
        }

    return _build
