import json

import pytest

from handlers.create_contact.handler import handler as create_handler
from handlers.list_contacts.handler import handler


@pytest.fixture
def three_contacts(json_event, lambda_context) -> None:
    for index, name in enumerate(["Carlos Pereira", "Ana Beatriz Costa", "Maria Oliveira"]):
        response = create_handler(
            json_event(
                {
                    "name": name,
                    "contact": f"90000000{index}",
                    "email": f"contact{index}@example.com",
                    "picture": f"https://images.example.com/{index}.png",
                }
            ),
            lambda_context,
        )
        assert response["statusCode"] == 201


class TestListContactsHandler:
    def test_list_all_ordered_by_name(self, three_contacts, lambda_context) -> None:
        response = handler({"httpMethod": "GET", "queryStringParameters": None}, lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["success"] is True
        assert body["total"] == 3
        assert [c["name"] for c in body["data"]] == ["Ana Beatriz Costa", "Carlos Pereira", "Maria Oliveira"]
        assert "pagination" not in body

    def test_search(self, three_contacts, lambda_context) -> None:
        response = handler({"queryStringParameters": {"search": "maria"}}, lambda_context)

        body = json.loads(response["body"])
        assert body["total"] == 1
        assert body["data"][0]["name"] == "Maria Oliveira"

    def test_empty_list(self, lambda_context) -> None:
        response = handler({"queryStringParameters": {}}, lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["data"] == []
        assert body["total"] == 0

    def test_pagination(self, three_contacts, lambda_context) -> None:
        response = handler({"queryStringParameters": {"limit": "2", "offset": "0"}}, lambda_context)

        body = json.loads(response["body"])
        assert [c["name"] for c in body["data"]] == ["Ana Beatriz Costa", "Carlos Pereira"]
        assert body["total"] == 2
        assert body["pagination"] == {
            "limit": 2,
            "offset": 0,
            "total_count": 3,
            "has_more": True,
            "next_offset": 2,
        }

    def test_limit_without_offset_returns_everything(self, three_contacts, lambda_context) -> None:
        response = handler({"queryStringParameters": {"limit": "1"}}, lambda_context)

        body = json.loads(response["body"])
        assert body["total"] == 3
        assert "pagination" not in body

    @pytest.mark.parametrize("params", [{"limit": "0", "offset": "0"}, {"limit": "101", "offset": "0"}, {"limit": "ten"}])
    def test_invalid_pagination(self, params, lambda_context) -> None:
        response = handler({"queryStringParameters": params}, lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"] == "VALIDATION_FAILED"
