"""
Tests for the terminal chat loop, with scripted input and a fake relay.
"""
import pytest

from menubot.cli import chat_loop
from menubot.client.conversation import Conversation
from menubot.errors import ChatError
from menubot.models.chat import GREETING


class FakeRelay:
    def __init__(self, *replies):
        self.replies = list(replies)

    async def send(self, messages):
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def _scripted(lines):
    lines = list(lines)

    def read(prompt):
        if not lines:
            raise EOFError
        return lines.pop(0)

    return read


@pytest.mark.asyncio
async def test_greeting_reply_and_error():
    output = []
    conversation = Conversation(FakeRelay("Try naengmyeon.", ChatError("API error: 500")))

    await chat_loop(conversation, read=_scripted(["Cold food?", "And dessert?"]), write=output.append)

    assert output[0] == f"bot> {GREETING}"
    assert "bot> Thinking..." in output
    assert "bot> Try naengmyeon." in output
    assert "bot> An error occurred: API error: 500" in output
    assert len(conversation) == 2


@pytest.mark.asyncio
async def test_reset_and_quit():
    output = []
    conversation = Conversation(FakeRelay("ok"))

    await chat_loop(
        conversation,
        read=_scripted(["Hi", "/reset", "/quit", "never read"]),
        write=output.append,
    )

    assert len(conversation) == 0
    assert output.count(f"bot> {GREETING}") == 2


@pytest.mark.asyncio
async def test_blank_lines_skipped():
    output = []
    conversation = Conversation(FakeRelay())

    await chat_loop(conversation, read=_scripted(["", "   "]), write=output.append)

    assert output == [f"bot> {GREETING}"]
