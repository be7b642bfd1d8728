"""
Lambda handler responsible for deleting a contact.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import ContactServiceError
from core.services.contact_coordinator import ContactCoordinator
from core.utils.decorators import api_gateway_handler
from core.utils.events import parse_contact_id
from core.utils.response import ResponseBuilder

from .models import DeleteContactResponse, DeletedContact

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle contact deletion requests.

    The record is removed first; its managed image file is then removed
    on a best-effort basis.

    Args:
        event: API Gateway Lambda proxy event with the ``id`` path parameter
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received contact delete request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "path_params": event.get("pathParameters"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    try:
        contact_id = parse_contact_id(event)
        result = ContactCoordinator().delete_contact(contact_id)

    except ContactServiceError as exc:
        logger.warning(
            "Contact deletion rejected",
            extra={"error_code": exc.error_code, "error": exc.message},
        )
        return ResponseBuilder.from_error(exc, request_id=request_id)

    metrics.add_metric(name="ContactDeleted", unit=MetricUnit.Count, value=1)

    response = DeleteContactResponse(data=DeletedContact(**result))

    return ResponseBuilder.ok(response.model_dump())
