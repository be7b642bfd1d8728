"""
Lambda handler responsible for partially updating a contact.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.errors import ContactServiceError
from core.models.upload import FilePart
from core.services.contact_coordinator import ContactCoordinator
from core.utils.constants import PICTURE_FIELD
from core.utils.decorators import api_gateway_handler
from core.utils.events import parse_contact_id, parse_form_event
from core.utils.response import ResponseBuilder

from .models import UpdateContactResponse

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle contact update requests.

    Only non-empty fields are applied. A new ``picture`` file replaces
    the stored image, and the previous image is removed once the record
    points at the new one.

    Args:
        event: API Gateway Lambda proxy event with the ``id`` path parameter
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response containing the updated contact
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received contact update request",
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
        parts = parse_form_event(event)
        contact = ContactCoordinator().update_contact(contact_id, parts)

    except ContactServiceError as exc:
        logger.warning(
            "Contact update rejected",
            extra={"error_code": exc.error_code, "error": exc.message},
        )
        return ResponseBuilder.from_error(exc, request_id=request_id)

    metrics.add_metric(name="ContactUpdated", unit=MetricUnit.Count, value=1)
    if isinstance(parts.get(PICTURE_FIELD), FilePart):
        metrics.add_metric(name="ImageStored", unit=MetricUnit.Count, value=1)

    response = UpdateContactResponse(data=contact)

    return ResponseBuilder.ok(response.model_dump())
