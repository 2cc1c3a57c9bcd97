"""Chat Agent — relays a conversation to the model."""

from __future__ import annotations

import logging
from typing import Iterable

from buildcost.agents.base import CompletionClient
from buildcost.schemas.chat import ChatMessage

logger = logging.getLogger(__name__)


def to_provider_messages(history: Iterable[ChatMessage], message: str) -> list[dict[str, str]]:
    """Translate history into OpenAI-style messages and append the new user turn.

    ``"model"`` turns become ``"assistant"``; everything else is ``"user"``.
    """
    messages = [
        {"role": "assistant" if turn.role == "model" else "user", "content": turn.text}
        for turn in history
    ]
    messages.append({"role": "user", "content": message})
    return messages


class ChatAgent:
    """Free-form chat; the caller owns the history."""

    name = "Chat"

    def __init__(self, client: CompletionClient) -> None:
        self.client = client

    async def send(self, history: Iterable[ChatMessage | dict], message: str) -> str:
        """Send ``message`` after ``history``; returns the reply or ``""``.

        Dict entries are validated as ``ChatMessage``.
        """
        turns = [ChatMessage.model_validate(h) if isinstance(h, dict) else h for h in history]
        messages = to_provider_messages(turns, message)
        logger.debug("Chat request with %d messages", len(messages))
        return await self.client.chat_completion(messages=messages)
