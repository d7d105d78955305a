"""
Client-side conversation state.

Holds the ordered user/assistant history for one chat session and mediates
each turn through the relay:

    IDLE → send() → AWAITING_RESPONSE → reply appended | user turn rolled back → IDLE

Only one request may be in flight at a time.
"""
import enum
import logging
from typing import List, NamedTuple, Optional, Protocol, Sequence, Tuple

from menubot.errors import ChatError, ConversationBusyError
from menubot.models.chat import ChatMessage, system_message

log = logging.getLogger("conversation")


class Relay(Protocol):
    async def send(self, messages: Sequence[ChatMessage]) -> str: ...


class ConversationState(enum.Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class Reply(NamedTuple):
    ok: bool
    text: str


class Conversation:
    """One chat session's history. Not persisted."""

    def __init__(self, relay: Relay):
        self.relay = relay
        self._messages: List[ChatMessage] = []
        self.state = ConversationState.IDLE

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def reset(self):
        if self.state is ConversationState.AWAITING_RESPONSE:
            raise ConversationBusyError("Cannot reset while awaiting a reply")
        self._messages.clear()

    async def send(self, text: str) -> Optional[Reply]:
        """
        Send one user turn.

        Returns None for blank input. On failure the user message is removed
        again and the reply carries the error text for display.
        """
        text = text.strip()
        if not text:
            return None
        if self.state is ConversationState.AWAITING_RESPONSE:
            raise ConversationBusyError("A message is already awaiting a reply")

        self._messages.append(ChatMessage(role="user", content=text))
        self.state = ConversationState.AWAITING_RESPONSE
        try:
            content = await self.relay.send([system_message()] + self._messages)
            reply = ChatMessage(role="assistant", content=content)
        except ChatError as e:
            # Drop the pending user turn so the history matches what the model has seen
            self._messages.pop()
            log.warning(f"Chat request failed: {e.message}")
            return Reply(ok=False, text=f"An error occurred: {e.message}")
        except BaseException:
            self._messages.pop()
            raise
        finally:
            self.state = ConversationState.IDLE

        self._messages.append(reply)
        return Reply(ok=True, text=reply.content)
