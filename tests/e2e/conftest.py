"""End-to-end fixtures; tests run only against a deployed API."""

import base64
import logging
import os
import uuid

import pytest
import requests

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

ENV_E2E_API_URL = "E2E_API_URL"
ENV_E2E_API_KEY = "E2E_API_KEY"


class E2EAPIClient:
    """Wrapper for making HTTP requests to the API"""

    def __init__(self, endpoint, headers):
        self.endpoint = endpoint
        self.headers = headers

    def _headers(self, headers=None):
        h = self.headers.copy()
        if headers:
            h.update(headers)
        return h

    def post(self, path, data=None, json=None, files=None, headers=None):
        """Make POST request (form fields, files or JSON)"""
        url = f"{self.endpoint}{path}"
        return requests.post(url, data=data, json=json, files=files, headers=self._headers(headers), timeout=30)

    def put(self, path, data=None, json=None, files=None, headers=None):
        """Make PUT request"""
        url = f"{self.endpoint}{path}"
        return requests.put(url, data=data, json=json, files=files, headers=self._headers(headers), timeout=30)

    def get(self, path, params=None, headers=None):
        """Make GET request"""
        url = f"{self.endpoint}{path}"
        return requests.get(url, params=params, headers=self._headers(headers), timeout=30)

    def delete(self, path, headers=None):
        """Make DELETE request"""
        url = f"{self.endpoint}{path}"
        return requests.delete(url, headers=self._headers(headers), timeout=30)


@pytest.fixture(scope="session")
def api_endpoint() -> str:
    endpoint = os.getenv(ENV_E2E_API_URL)
    if not endpoint:
        pytest.skip(f"{ENV_E2E_API_URL} is not set")
    return endpoint.rstrip("/")


@pytest.fixture(scope="session")
def api_headers() -> dict[str, str]:
    api_key = os.getenv(ENV_E2E_API_KEY)
    return {"x-api-key": api_key} if api_key else {}


@pytest.fixture(scope="session")
def api_client(api_endpoint, api_headers) -> E2EAPIClient:
    return E2EAPIClient(api_endpoint, api_headers)


@pytest.fixture
def sample_png() -> bytes:
    return base64.b64decode(
        "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    )


@pytest.fixture
def unique_contact() -> dict[str, str]:
    """Contact fields that do not collide with other runs."""
    token = uuid.uuid4().int
    return {
        "name": f"E2E Contact {token % 10_000}",
        "contact": f"{token % 1_000_000_000:09d}",
        "email": f"e2e-{uuid.uuid4().hex[:12]}@example.com",
    }


@pytest.fixture
def cleanup_contacts(api_client):
    """Collect contact ids to delete after the test."""
    created: list[int] = []
    yield created

    for contact_id in created:
        response = api_client.delete(f"/api/contacts/{contact_id}")
        logger.info("Cleanup contact %s -> %s", contact_id, response.status_code)
