"""
AWS Lambda handler for contact form submissions (API Gateway proxy).

Thin orchestration layer that delegates to SubmissionPipeline.
Policy: internal error details are logged, never returned to the caller.
"""

import base64
import json
import logging
import os
from typing import Dict, Any, Optional

from domain.models import SenderIdentity
from domain.submission_pipeline import FAILURE_MESSAGE, SubmissionPipeline
from services.mailer import SesMailDispatcher, initialize_ses_client
from services.store import DynamoDBSubmissionStore, initialize_table
from settings import CORS_ALLOW_ORIGIN, ENVIRONMENT, LOG_LEVEL, load_settings

# Configure logging
logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)

# Add console handler for local testing (AWS Lambda provides handlers automatically)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)


# Built on first invocation, then reused across warm invocations
_pipeline: Optional[SubmissionPipeline] = None


def build_pipeline() -> SubmissionPipeline:
    """
    Wire the pipeline from environment settings.

    Verifies the mail transport once; the result is only logged.

    Raises:
        ConfigurationError: If required environment variables are missing
    """
    settings = load_settings()

    store = DynamoDBSubmissionStore(initialize_table(settings.contacts_table, settings.dynamodb_region))
    dispatcher = SesMailDispatcher(initialize_ses_client(settings.ses_region))
    dispatcher.verify()

    return SubmissionPipeline(
        store=store,
        dispatcher=dispatcher,
        operator_address=settings.operator_email,
        sender_identity=SenderIdentity(
            address=settings.sender_email,
            display_name=settings.sender_name
        )
    )


def get_pipeline() -> SubmissionPipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = build_pipeline()
    return _pipeline


def _cors_headers() -> Dict[str, str]:
    return {
        'Access-Control-Allow-Origin': CORS_ALLOW_ORIGIN,
        'Access-Control-Allow-Methods': 'POST,OPTIONS',
        'Access-Control-Allow-Headers': 'Content-Type',
    }


def _response(status_code: int, payload: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    headers = {'Content-Type': 'application/json'}
    headers.update(_cors_headers())
    return {
        'statusCode': status_code,
        'headers': headers,
        'body': json.dumps(payload) if payload is not None else '',
    }


def _http_method(event: Dict[str, Any]) -> str:
    # REST API (v1) sets httpMethod, HTTP API (v2) nests it under requestContext
    method = event.get('httpMethod')
    if not method:
        http = (event.get('requestContext') or {}).get('http') or {}
        method = http.get('method') or ''
    return method.upper()


def _parse_json_body(event: Dict[str, Any]) -> Any:
    """
    Decode the request body; a missing or malformed body yields {}.

    Direct invocations (test console, SDK) may pass the body as an object.
    """
    body = event.get('body') or ''
    if isinstance(body, dict):
        return body
    try:
        if event.get('isBase64Encoded'):
            body = base64.b64decode(body).decode('utf-8')
        return json.loads(body) if body else {}
    except (ValueError, TypeError, UnicodeDecodeError) as e:
        logger.warning(f"Could not decode request body: {e}")
        return {}


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Process a contact form submission.

    Expected request body:
    {
        "name": "Ada",
        "email": "ada@example.com",
        "subject": "Optional subject",
        "message": "Hello"
    }

    Returns:
        API Gateway proxy response with body {"success": bool, "message": str}
    """
    if _http_method(event) == 'OPTIONS':
        return _response(204, None)

    try:
        pipeline = get_pipeline()
        result = pipeline.process(_parse_json_body(event))
    except Exception as e:
        logger.error(f"Error processing contact form: {e}", exc_info=True)
        return _response(500, {'success': False, 'message': FAILURE_MESSAGE})

    logger.info(f"Contact form processed: {result!r}")
    return _response(result.status_code, result.to_response_body())


def health_check(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Simple health check endpoint for monitoring.
    """
    return _response(200, {
        'status': 'healthy',
        'environment': ENVIRONMENT,
        'tableConfigured': bool(os.environ.get('CONTACTS_TABLE')),
        'operatorConfigured': bool(os.environ.get('OPERATOR_EMAIL')),
    })
