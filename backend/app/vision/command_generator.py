"""
Command Generator - second stage of the analysis pipeline.

Turns the recognized problem text into GeoGebra construction commands using a
text model restricted to an allow-listed command vocabulary, then filters the
model output down to lines that look like commands.
"""

import re
from typing import Any, Optional
from loguru import logger

from ..config import Settings
from ..errors import EmptyResponse
from ..llm import ChatCompletionClient, get_chat_client
from .prompts import CODEGEN_PROMPT, DEMO_COMMANDS

COMMENT_PREFIXES = ("#", "//", "/*")
COMMAND_CHARS = re.compile(r"[=()]")


def is_command_line(line: str) -> bool:
    """
    Check whether a single (already trimmed) line is a command.

    A command is non-empty, is not a comment, and contains at least one of
    ``=``, ``(`` or ``)``.
    """
    if not line:
        return False
    if line.startswith(COMMENT_PREFIXES):
        return False
    return COMMAND_CHARS.search(line) is not None


def _clean_line(line: str) -> str:
    # Fence delimiters (``` and ```lang) reduce to empty or a bare tag word,
    # neither of which passes is_command_line.
    return line.strip().strip("`").strip()


def extract_commands(content: str) -> str:
    """
    Extract GeoGebra commands from raw model output.

    Markdown fence delimiters are removed, each line is trimmed, and only lines
    accepted by ``is_command_line`` are kept, in their original order.

    Args:
        content: Raw model output

    Returns:
        Newline-separated commands (empty string if none survive)
    """
    lines = (_clean_line(line) for line in content.splitlines())
    return "\n".join(line for line in lines if is_command_line(line))


def message_text(message: Any) -> Optional[str]:
    """
    Get the generated text from a chat message.

    Reasoning models may leave ``content`` empty and put their output in
    ``reasoning_content``; that field is only used when ``content`` is empty.
    """
    content = getattr(message, "content", None)
    if content:
        return content

    reasoning = getattr(message, "reasoning_content", None)
    if reasoning:
        logger.info("Using reasoning_content as fallback")
        return reasoning

    return None


class CommandGenerator:
    """Generates GeoGebra commands from a problem description."""

    def __init__(self, settings: Settings, client: Optional[ChatCompletionClient] = None):
        """
        Initialize command generator.

        Args:
            settings: Application settings (model name, key, test mode)
            client: Optional provider client; built from settings when omitted
        """
        self.settings = settings
        self.model = settings.codegen_model
        if client is None and not settings.demo_mode:
            client = get_chat_client(settings)
        self.client = client

    async def generate(self, problem_description: str) -> str:
        """
        Generate commands for a problem description.

        Args:
            problem_description: Output of the recognition stage

        Returns:
            Filtered, newline-separated GeoGebra commands

        Raises:
            EmptyResponse: If the model returned no text at all
            ProviderError: If the provider call failed
        """
        if self.settings.demo_mode:
            logger.warning("AI_API_KEY not configured or test mode enabled, returning demo commands")
            return DEMO_COMMANDS

        messages = [
            {"role": "system", "content": CODEGEN_PROMPT},
            {"role": "user", "content": problem_description}
        ]

        message = await self.client.complete(self.model, messages)
        content = message_text(message)

        if not content:
            logger.error(f"Empty codegen message: {message!r}")
            raise EmptyResponse("Codegen AI returned empty response")

        return extract_commands(content)
