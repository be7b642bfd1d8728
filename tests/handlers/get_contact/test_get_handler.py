import json

from handlers.get_contact.handler import handler


class TestGetContactHandler:
    def test_get_existing(self, created_contact, lambda_context) -> None:
        event = {"httpMethod": "GET", "pathParameters": {"id": str(created_contact["id"])}}

        response = handler(event, lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["success"] is True
        assert body["data"] == created_contact

    def test_get_missing(self, lambda_context) -> None:
        response = handler({"httpMethod": "GET", "pathParameters": {"id": "12345"}}, lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["error"] == "NOT_FOUND"

    def test_get_invalid_id(self, lambda_context) -> None:
        response = handler({"httpMethod": "GET", "pathParameters": {"id": "abc"}}, lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"] == "INVALID_ID"
