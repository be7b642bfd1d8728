"""
Lambda handler responsible for serving stored contact images.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.infrastructure.local.disk_image_storage import LocalDiskImageStorage
from core.models.errors import NotFoundError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import GetImageRequest

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Return the bytes of an image from the managed upload directory.

    Args:
        event: API Gateway event payload with the ``file_name`` path parameter.
        context: AWS Lambda runtime context.

    Returns:
        Base64-encoded binary response, or 404 when the file does not exist.
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received image request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "path_params": event.get("pathParameters"),
            "request_id": request_id,
            "function_name": getattr(context, "function_name", None),
        },
    )

    path_params = event.get("pathParameters") or {}

    is_valid, result = validate_request(
        GetImageRequest,
        {"file_name": path_params.get("file_name")},
        request_id=request_id,
    )
    if not is_valid:
        return result

    request: GetImageRequest = result

    try:
        content, content_type = LocalDiskImageStorage().read(request.file_name)
    except NotFoundError as exc:
        logger.warning("Image not found", extra={"file_name": request.file_name})
        return ResponseBuilder.from_error(exc, request_id=request_id)

    metrics.add_metric(name="ImageServed", unit=MetricUnit.Count, value=1)

    return ResponseBuilder.binary_response(
        content,
        content_type=content_type,
        headers={"Cache-Control": "public, max-age=86400"},
    )
