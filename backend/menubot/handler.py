"""
Serverless entry point for the chat relay (Netlify Functions / AWS Lambda proxy events).

Same contract as POST /api/chat on the dev server:
    {"messages": [...]} -> 200 {"content": ...} | non-2xx {"error": ...}
"""
import asyncio
import base64
import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from menubot.config import Settings, get_settings
from menubot.errors import RelayError
from menubot.models.chat import ChatRequest
from menubot.services.completion import CompletionClient
from menubot.services.relay import relay_chat

log = logging.getLogger("handler")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Content-Type": "application/json",
}


def _response(status_code: int, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps(payload) if payload is not None else "",
    }


def _http_method(event: Dict[str, Any]) -> str:
    method = event.get("httpMethod")
    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method") or ""
    return str(method).upper()


def _request_body(event: Dict[str, Any]) -> str:
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body)
    if isinstance(body, bytes):
        body = body.decode("utf-8")
    return body


async def _relay(request: ChatRequest, settings: Settings) -> str:
    async with CompletionClient(settings.openai_api_url, settings.request_timeout) as client:
        return await relay_chat(request.messages, settings, client)


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Function entry point. Never raises; every failure becomes an {error} response."""
    method = _http_method(event)

    # CORS preflight
    if method == "OPTIONS":
        return _response(200)

    if method != "POST":
        return _response(405, {"error": "Method not allowed"})

    try:
        request = ChatRequest.model_validate_json(_request_body(event))
    except (ValidationError, ValueError) as e:
        log.warning(f"Rejected invalid relay request: {e.__class__.__name__}")
        detail = e.errors()[0]["msg"] if isinstance(e, ValidationError) and e.errors() else str(e)
        return _response(400, {"error": f"Invalid request: {detail}"})

    try:
        content = asyncio.run(_relay(request, get_settings()))
    except RelayError as e:
        return _response(e.status_code, {"error": e.message})
    except Exception as e:
        log.exception("Relay failed")
        return _response(500, {"error": str(e) or "Internal server error"})

    return _response(200, {"content": content})


# AWS Lambda looks for lambda_handler by convention
lambda_handler = handler
