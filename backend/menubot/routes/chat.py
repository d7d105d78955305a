"""
Chat relay API routes.
"""
from fastapi import APIRouter, Depends, Request

from menubot.config import Settings, get_settings
from menubot.models.chat import ChatRequest, ChatResponse, ErrorResponse
from menubot.services.completion import CompletionClient
from menubot.services.relay import relay_chat

router = APIRouter()


def get_completion_client(request: Request) -> CompletionClient:
    """The shared client created in the app lifespan"""
    return request.app.state.completion_client


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat_endpoint(
    request: ChatRequest,
    settings: Settings = Depends(get_settings),
    client: CompletionClient = Depends(get_completion_client),
):
    """Relay the conversation to the completion API. Errors are rendered by the RelayError handler."""
    content = await relay_chat(request.messages, settings, client)
    return ChatResponse(content=content)


@router.get("/status")
async def status_endpoint(settings: Settings = Depends(get_settings)):
    """Whether the relay has a usable API key. Never returns the key itself."""
    return {
        "api_key_configured": settings.api_key_configured(),
        "mode": settings.app_env,
    }
