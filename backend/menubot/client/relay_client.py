"""
HTTP client the chat front end uses to reach the relay.
"""
from typing import Sequence

import httpx
from pydantic import ValidationError

from menubot.errors import ChatError
from menubot.models.chat import ChatMessage, ChatResponse


class RelayClient:
    """Async client for POST /api/chat (or the serverless function path)."""

    def __init__(self, base_url: str = "http://127.0.0.1:8000", path: str = "/api/chat", timeout: float = 60.0):
        self.base_url = base_url
        self.path = path
        self.client = httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self) -> "RelayClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def send(self, messages: Sequence[ChatMessage]) -> str:
        payload = {"messages": [m.model_dump() for m in messages]}
        try:
            response = await self.client.post(self.path, json=payload)
        except httpx.RequestError as e:
            raise ChatError(f"Request error: {e}") from e

        if response.is_error:
            try:
                error = response.json().get("error")
            except (ValueError, AttributeError):
                error = None
            raise ChatError(error or f"API error: {response.status_code}", response.status_code)

        try:
            return ChatResponse.model_validate_json(response.content).content
        except ValidationError as e:
            raise ChatError("Unexpected response from the relay") from e
