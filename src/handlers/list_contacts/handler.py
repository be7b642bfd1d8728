"""
Lambda handler responsible for listing contacts with optional search and pagination.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.contact import ListContactsResponse
from core.models.errors import ContactServiceError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import ListContactsRequest
from .service import ListService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to list contacts.

    Supports:
    - Filtering by name substring (``search``)
    - Offset-based pagination when both ``limit`` and ``offset`` are given
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received contact list request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    params = event.get("queryStringParameters") or {}

    is_valid, result = validate_request(ListContactsRequest, params, request_id=request_id)
    if not is_valid:
        return result

    request: ListContactsRequest = result

    try:
        contacts, pagination = ListService().list_contacts(
            search=request.search,
            limit=request.limit,
            offset=request.offset,
        )
    except ContactServiceError as exc:
        logger.exception("Error listing contacts")
        return ResponseBuilder.from_error(exc, request_id=request_id)

    response = ListContactsResponse(
        data=contacts,
        total=len(contacts),
        message="Contacts listed successfully",
        pagination=pagination,
    )

    return ResponseBuilder.ok(response.model_dump(exclude_none=True))
