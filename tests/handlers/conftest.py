import json
from collections.abc import Callable
from typing import Any

import pytest

from handlers.create_contact.handler import handler as create_handler


@pytest.fixture(autouse=True)
def handler_environment(database_url, upload_root):
    """Every handler test gets its own database file and upload directory."""
    return {"database_url": database_url, "upload_root": upload_root}


@pytest.fixture
def create_event(multipart_event, sample_image_binary) -> Callable[..., dict[str, Any]]:
    def _build(**overrides: str) -> dict[str, Any]:
        fields = {"name": "João da Silva", "contact": "123456789", "email": "joao@teste.com"}
        fields.update(overrides)
        return multipart_event(fields, {"picture": ("test.png", sample_image_binary, "image/png")})

    return _build


@pytest.fixture
def created_contact(create_event, lambda_context) -> dict[str, Any]:
    """A contact created through the create handler with an uploaded picture."""
    response = create_handler(create_event(), lambda_context)
    assert response["statusCode"] == 201
    return json.loads(response["body"])["data"]


def stored_files(images_dir) -> list[str]:
    if not images_dir.exists():
        return []
    return sorted(path.name for path in images_dir.iterdir())


@pytest.fixture
def list_stored_files(images_dir) -> Callable[[], list[str]]:
    return lambda: stored_files(images_dir)
