"""
Lambda handler responsible for creating a contact and storing its picture.
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
from core.utils.events import parse_form_event
from core.utils.response import ResponseBuilder

from .models import CreateContactResponse

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle contact creation requests.

    Accepts a multipart form (text fields plus an optional ``picture``
    file), a urlencoded form or a JSON object. A picture is mandatory:
    either an uploaded image or a ``picture`` text value.

    Args:
        event: API Gateway Lambda proxy event containing the submission
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response containing the created contact
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received contact create request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    try:
        parts = parse_form_event(event)
        contact = ContactCoordinator().create_contact(parts)

    except ContactServiceError as exc:
        logger.warning(
            "Contact creation rejected",
            extra={"error_code": exc.error_code, "error": exc.message},
        )
        return ResponseBuilder.from_error(exc, request_id=request_id)

    metrics.add_metric(name="ContactCreated", unit=MetricUnit.Count, value=1)
    if isinstance(parts.get(PICTURE_FIELD), FilePart):
        metrics.add_metric(name="ImageStored", unit=MetricUnit.Count, value=1)

    response = CreateContactResponse(data=contact)

    return ResponseBuilder.created(response.model_dump())
