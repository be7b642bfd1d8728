"""
Lambda handler responsible for retrieving a single contact.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.infrastructure.sql.sql_contact_repository import SqlContactRepository
from core.models.errors import ContactServiceError
from core.utils.decorators import api_gateway_handler
from core.utils.events import parse_contact_id
from core.utils.response import ResponseBuilder

from .models import GetContactResponse

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Return the contact identified by the ``id`` path parameter."""
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received contact get request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "path_params": event.get("pathParameters"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    try:
        contact_id = parse_contact_id(event)
        contact = SqlContactRepository().find_by_id(contact_id)

    except ContactServiceError as exc:
        logger.warning(
            "Contact lookup failed",
            extra={"error_code": exc.error_code, "error": exc.message},
        )
        return ResponseBuilder.from_error(exc, request_id=request_id)

    return ResponseBuilder.ok(GetContactResponse(data=contact).model_dump())
