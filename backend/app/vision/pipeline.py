"""
Analysis pipeline orchestration.
Runs problem recognition, then command generation on the recognized text.
"""

from dataclasses import dataclass
from typing import Optional
from loguru import logger

from ..config import Settings
from ..llm import ChatCompletionClient, get_chat_client
from .recognizer import ProblemRecognizer
from .command_generator import CommandGenerator


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one image analysis."""
    ocr_result: str
    commands: str


class AnalysisPipeline:
    """Orchestrates the two-stage image analysis."""

    def __init__(
        self,
        settings: Settings,
        recognizer: Optional[ProblemRecognizer] = None,
        generator: Optional[CommandGenerator] = None,
        client: Optional[ChatCompletionClient] = None
    ):
        """
        Initialize pipeline stages.

        Args:
            settings: Application settings shared by both stages
            recognizer: Optional recognition stage override
            generator: Optional command generation stage override
            client: Optional provider client shared by default stages
        """
        if client is None and not settings.demo_mode:
            client = get_chat_client(settings)
        self.recognizer = recognizer or ProblemRecognizer(settings, client=client)
        self.generator = generator or CommandGenerator(settings, client=client)

    async def analyze(self, base64_image: str, mime_type: str) -> AnalysisResult:
        """
        Analyze a geometry problem image.

        The generation stage starts only after recognition has finished, since it
        consumes the recognized text. A failure in either stage propagates and no
        partial result is returned.

        Args:
            base64_image: Base64-encoded image bytes
            mime_type: Image MIME type

        Returns:
            AnalysisResult with the recognized text and the filtered commands
        """
        logger.info("Step 1: Recognizing image content...")
        ocr_result = await self.recognizer.recognize(base64_image, mime_type)
        logger.debug(f"OCR result: {ocr_result}")

        logger.info("Step 2: Generating GeoGebra code...")
        commands = await self.generator.generate(ocr_result)
        logger.debug(f"Generated commands: {commands}")

        return AnalysisResult(ocr_result=ocr_result, commands=commands)


def get_analysis_pipeline(settings: Settings) -> AnalysisPipeline:
    """Build an AnalysisPipeline for the given settings."""
    return AnalysisPipeline(settings)
