"""
Chat completion client for the AI provider.
Uses the OpenAI-compatible API (DashScope compatible mode by default).
"""

from openai import AsyncOpenAI, OpenAIError
from typing import List, Dict, Any, Optional, Tuple
from loguru import logger

from ..config import Settings
from ..errors import ProviderError


class ChatCompletionClient:
    """Async client for OpenAI-compatible chat completion endpoints."""

    def __init__(self, api_key: str, base_url: str):
        """
        Initialize chat completion client.

        Args:
            api_key: Provider API key
            base_url: OpenAI-compatible endpoint
        """
        self.base_url = base_url
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url
        )

    async def complete(self, model: str, messages: List[Dict[str, Any]]) -> Optional[Any]:
        """
        Run one chat completion.

        Args:
            model: Model name
            messages: List of message dicts with 'role' and 'content'

        Returns:
            The first choice's message object, or None if the response has no choices

        Raises:
            ProviderError: If the provider call fails
        """
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=messages
            )
        except OpenAIError as e:
            logger.error(f"Error calling {model}: {e}")
            raise ProviderError(str(e)) from e

        logger.debug(f"{model} response: {response}")

        if not response.choices:
            return None
        return response.choices[0].message

    async def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.client.close()


# Shared clients, one per (api key, base url)
_chat_clients: Dict[Tuple[str, str], ChatCompletionClient] = {}


def get_chat_client(settings: Settings) -> ChatCompletionClient:
    """
    Get the shared provider client for the given settings.

    Args:
        settings: Application settings (must carry ai_api_key)

    Returns:
        ChatCompletionClient instance, created on first use
    """
    key = (settings.ai_api_key, settings.ai_base_url)
    if key not in _chat_clients:
        _chat_clients[key] = ChatCompletionClient(api_key=settings.ai_api_key, base_url=settings.ai_base_url)
    return _chat_clients[key]


async def close_chat_clients() -> None:
    """Close and forget every shared client."""
    while _chat_clients:
        _, client = _chat_clients.popitem()
        await client.close()
