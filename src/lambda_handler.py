"""AWS Lambda handler serving the menu API behind API Gateway.

API Gateway requests are passed to the FastAPI application through the
Mangum ASGI adapter.
"""

import logging
import os
from typing import Any

from mangum import Mangum

from lambda_dependencies import get_fastapi_app, initialize_lambda_environment

# Initialize Lambda environment during cold start (skip in test mode)
if os.getenv("ENVIRONMENT") != "test":
    initialize_lambda_environment()

logger = logging.getLogger(__name__)

_mangum_handler: Mangum | None = None


def get_mangum_handler() -> Mangum:
    """Create or retrieve the cached Mangum adapter.

    Returns:
        Mangum adapter wrapping the FastAPI application
    """
    global _mangum_handler

    if _mangum_handler is None:
        _mangum_handler = Mangum(get_fastapi_app(), lifespan="off")
    return _mangum_handler


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Lambda entry point for API Gateway requests.

    Args:
        event: The API Gateway event payload
        context: The Lambda context object

    Returns:
        API Gateway response dict with statusCode and body
    """
    logger.info(f"Received Lambda invocation, request_id: {getattr(context, 'aws_request_id', None)}")

    try:
        result: dict[str, Any] = get_mangum_handler()(event, context)
        return result

    except Exception as e:
        logger.exception(f"Unhandled error in Lambda handler: {e}")
        return {
            "statusCode": 500,
            "body": f"Internal server error: {str(e)}",
        }
