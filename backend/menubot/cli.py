"""
Terminal chat front end for the relay.

    menubot-chat --url http://127.0.0.1:8000
"""
import argparse
import asyncio
import logging

from menubot.client.conversation import Conversation
from menubot.client.relay_client import RelayClient
from menubot.models.chat import GREETING

QUIT_COMMANDS = {"/quit", "/exit"}
RESET_COMMAND = "/reset"


async def chat_loop(conversation: Conversation, read=input, write=print):
    write(f"bot> {GREETING}")
    while True:
        try:
            line = await asyncio.to_thread(read, "you> ")
        except EOFError:
            break
        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command == RESET_COMMAND:
            conversation.reset()
            write(f"bot> {GREETING}")
            continue

        if not line.strip():
            continue
        write("bot> Thinking...")
        reply = await conversation.send(line)
        write(f"bot> {reply.text}")


async def _main(url: str, path: str):
    async with RelayClient(base_url=url, path=path) as relay:
        await chat_loop(Conversation(relay))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Chat with the dinner menu recommendation bot.")
    parser.add_argument("--url", default="http://127.0.0.1:8000", help="Relay base URL")
    parser.add_argument("--path", default="/api/chat", help="Relay endpoint path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log relay errors to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.ERROR)
    try:
        asyncio.run(_main(args.url, args.path))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
