"""LLM client for the recognition and command generation stages."""

from .client import ChatCompletionClient, get_chat_client, close_chat_clients

__all__ = ["ChatCompletionClient", "get_chat_client", "close_chat_clients"]
