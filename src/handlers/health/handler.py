"""
Lambda handler reporting service health.
"""

import os
from typing import Any

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.infrastructure.sql.sql_contact_repository import SqlContactRepository
from core.utils.constants import DEFAULT_ENVIRONMENT, ENV_ENVIRONMENT, SERVICE_VERSION
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.time import utc_now_iso

from .models import HealthResponse

logger = Logger(UTC=True)
tracer = Tracer()


@api_gateway_handler
@tracer.capture_lambda_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Report whether the service can reach its database.

    Returns 200 when healthy and 503 when the database does not answer.
    """
    database_ok = SqlContactRepository().health_check()

    response = HealthResponse(
        status="healthy" if database_ok else "unhealthy",
        timestamp=utc_now_iso(),
        environment=os.getenv(ENV_ENVIRONMENT) or DEFAULT_ENVIRONMENT,
        database="connected" if database_ok else "disconnected",
        version=SERVICE_VERSION,
    )

    if not database_ok:
        logger.warning("Health check failed", extra={"database": response.database})
        return ResponseBuilder.service_unavailable(response.model_dump())

    return ResponseBuilder.ok(response.model_dump())
