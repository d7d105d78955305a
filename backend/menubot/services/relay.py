"""
Completion relay shared by the dev server route and the serverless handler.

Takes a conversation, injects the credential and completion parameters,
and returns the assistant text or raises RelayError.
"""
import logging
from typing import List, Sequence

from menubot.config import Settings
from menubot.errors import RelayError
from menubot.models.chat import ChatMessage, CompletionRequest, system_message
from menubot.services.completion import CompletionClient

log = logging.getLogger("relay")

MISSING_API_KEY_MESSAGE = "API key is not configured"


def with_system_prompt(messages: Sequence[ChatMessage]) -> List[ChatMessage]:
    """Prepend the system prompt unless the conversation already leads with one."""
    messages = list(messages)
    if not messages or messages[0].role != "system":
        messages = [system_message()] + messages
    return messages


def build_completion_request(messages: Sequence[ChatMessage], settings: Settings) -> CompletionRequest:
    return CompletionRequest(
        model=settings.model,
        messages=with_system_prompt(messages),
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
    )


async def relay_chat(
    messages: Sequence[ChatMessage],
    settings: Settings,
    client: CompletionClient,
) -> str:
    if not settings.api_key_configured():
        log.error("Relay called without an OpenAI API key")
        raise RelayError(500, MISSING_API_KEY_MESSAGE)

    request = build_completion_request(messages, settings)
    log.info(f"Relaying {len(request.messages)} messages to model={request.model}")

    content = await client.complete(request, settings.openai_api_key.strip())
    log.info(f"Completion returned {len(content)} chars")
    return content
