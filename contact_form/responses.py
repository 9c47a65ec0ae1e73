"""CORS headers and response helpers."""

from typing import Any, Dict, Optional

from contact_form.models import ResponseEnvelope

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = (
    "Content-Type,X-Amz-Date,Authorization,X-Api-Key,"
    "X-Amz-Security-Token,X-Requested-With"
)


def get_header(event: Dict[str, Any], name: str) -> Optional[str]:
    """Case-insensitive header lookup on an API Gateway event."""
    headers = event.get("headers")
    if not isinstance(headers, dict):
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted and value:
            return value
    return None


def get_method(event: Dict[str, Any]) -> Optional[str]:
    """
    Resolve the HTTP method from either API Gateway payload format.

    HTTP APIs (payload v2) put it under requestContext.http.method, REST APIs
    (payload v1) under httpMethod.
    """
    request_context = event.get("requestContext")
    http = request_context.get("http") if isinstance(request_context, dict) else None
    method = (http.get("method") if isinstance(http, dict) else None) or event.get("httpMethod")
    return method.upper() if isinstance(method, str) else None


def default_cors_headers(origin: str = "*") -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def build_cors_headers(event: Dict[str, Any]) -> Dict[str, str]:
    """
    Build the headers attached to every response.

    Args:
        event: API Gateway proxy event

    Returns:
        Content type and CORS headers, echoing the caller's Origin or "*"
    """
    return default_cors_headers(get_header(event, "Origin") or "*")


def preflight_response(headers: Dict[str, str]) -> ResponseEnvelope:
    return ResponseEnvelope(200, dict(headers), "")


def success_response(headers: Dict[str, str], message: str) -> ResponseEnvelope:
    return ResponseEnvelope.build(200, headers, success=True, message=message)


def error_response(status_code: int, headers: Dict[str, str], error: str) -> ResponseEnvelope:
    return ResponseEnvelope.build(status_code, headers, success=False, error=error)
