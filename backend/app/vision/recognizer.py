"""
Problem Recognizer - first stage of the analysis pipeline.

Sends the uploaded image to a vision model that transcribes the problem text and
briefly describes the figure, without solving anything.
"""

from typing import Optional
from loguru import logger

from ..config import Settings
from ..errors import EmptyResponse
from ..llm import ChatCompletionClient, get_chat_client
from ..utils.encoding import build_data_uri
from .prompts import RECOGNITION_PROMPT, DEMO_RECOGNITION_RESULT


class ProblemRecognizer:
    """Transcribes a geometry problem image into plain text."""

    def __init__(self, settings: Settings, client: Optional[ChatCompletionClient] = None):
        """
        Initialize recognizer.

        Args:
            settings: Application settings (model name, key, test mode)
            client: Optional provider client; built from settings when omitted
        """
        self.settings = settings
        self.model = settings.ocr_model
        if client is None and not settings.demo_mode:
            client = get_chat_client(settings)
        self.client = client

    async def recognize(self, base64_image: str, mime_type: str) -> str:
        """
        Recognize the problem shown in an image.

        Args:
            base64_image: Base64-encoded image bytes
            mime_type: Image MIME type (e.g. image/png)

        Returns:
            Problem text followed by optional figure notes

        Raises:
            EmptyResponse: If the model returned no text
            ProviderError: If the provider call failed
        """
        if self.settings.demo_mode:
            logger.warning("AI_API_KEY not configured or test mode enabled, returning demo recognition result")
            return DEMO_RECOGNITION_RESULT

        messages = [
            {"role": "system", "content": RECOGNITION_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "image_url", "image_url": {"url": build_data_uri(mime_type, base64_image)}}
                ]
            }
        ]

        message = await self.client.complete(self.model, messages)
        content = getattr(message, "content", None)

        if not content:
            raise EmptyResponse("OCR AI returned empty response")

        return content
