"""
OpenAI chat-completion API client.
"""
import logging
from typing import Any

import httpx

from menubot.errors import RelayError
from menubot.models.chat import CompletionRequest

log = logging.getLogger("completion")

COMPLETIONS_PATH = "/v1/chat/completions"


def extract_error_message(response: httpx.Response) -> str:
    """Best-effort error text from an upstream failure body."""
    try:
        data: Any = response.json()
    except ValueError:
        data = {}
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return f"API error: {response.status_code}"


class CompletionClient:
    """Async HTTP client for the chat-completion endpoint. One call per request, no retries."""

    def __init__(self, base_url: str = "https://api.openai.com", timeout: float = 30.0):
        self.base_url = base_url
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            follow_redirects=True,
        )

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self) -> "CompletionClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def complete(self, request: CompletionRequest, api_key: str) -> str:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        try:
            response = await self.client.post(
                COMPLETIONS_PATH,
                json=request.model_dump(),
                headers=headers,
            )
        except httpx.RequestError as e:
            log.error(f"Completion request failed: {e.__class__.__name__}")
            raise RelayError(500, f"Request error: {e}") from e

        if response.is_error:
            message = extract_error_message(response)
            log.warning(f"Completion API returned {response.status_code}: {message}")
            raise RelayError(response.status_code, message)

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            log.error(f"Unexpected completion response shape: {e!r}")
            raise RelayError(500, "Unexpected response from the completion API") from e
        if not isinstance(content, str):
            raise RelayError(500, "Unexpected response from the completion API")
        return content
