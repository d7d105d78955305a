"""
Chat-related Pydantic models
"""
from typing import List, Literal

from pydantic import BaseModel, Field

Role = Literal["system", "user", "assistant"]


SYSTEM_PROMPT = (
    "You are a friendly dinner menu recommendation chatbot. "
    "Recommend tasty dinner menus that fit the user's tastes and situation. "
    "Keep the conversation friendly and natural."
)

GREETING = (
    "Hello! I'm a chatbot that recommends what to have for dinner tonight. "
    "What kind of food do you like? Or is there something you're craving?"
)


class ChatMessage(BaseModel):
    """Chat message model"""
    role: Role
    content: str


class ChatRequest(BaseModel):
    """Request model for the relay endpoint"""
    messages: List[ChatMessage] = Field(min_length=1)


class ChatResponse(BaseModel):
    content: str


class ErrorResponse(BaseModel):
    error: str


class CompletionRequest(BaseModel):
    """Body sent upstream to /v1/chat/completions"""
    model: str
    messages: List[ChatMessage]
    temperature: float
    max_tokens: int


def system_message() -> ChatMessage:
    return ChatMessage(role="system", content=SYSTEM_PROMPT)
