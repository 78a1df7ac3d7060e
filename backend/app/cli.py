"""
Command-line interface for img2ggb.
Runs the analysis pipeline on a local image, or starts the API server.
"""

import argparse
import asyncio
import mimetypes
from pathlib import Path
from typing import Optional
from loguru import logger

from .config import Settings, get_settings
from .llm import close_chat_clients
from .utils.encoding import encode_base64_chunked
from .utils.log_setup import configure_logging
from .vision import AnalysisResult, get_analysis_pipeline


def guess_mime_type(image_path: Path) -> str:
    """Guess an image MIME type from its file name, defaulting to image/png."""
    mime_type, _ = mimetypes.guess_type(image_path.name)
    return mime_type or "image/png"


async def analyze_file(
    image_path: Path,
    settings: Settings,
    mime_type: Optional[str] = None
) -> AnalysisResult:
    """
    Analyze a geometry problem image stored on disk.

    Args:
        image_path: Path to the image file
        settings: Application settings
        mime_type: Optional MIME type override (guessed from the extension otherwise)

    Returns:
        AnalysisResult with recognition text and commands
    """
    data = image_path.read_bytes()
    mime_type = mime_type or guess_mime_type(image_path)
    logger.info(f"Input: {image_path} ({len(data)} bytes, {mime_type})")

    try:
        pipeline = get_analysis_pipeline(settings)
        return await pipeline.analyze(encode_base64_chunked(data), mime_type)
    finally:
        await close_chat_clients()


def serve(settings: Settings) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "backend.app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower()
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="img2ggb - turn a geometry problem image into GeoGebra commands"
    )

    parser.add_argument(
        "image",
        type=str,
        nargs='?',
        default=None,
        help="Path to the problem image (omit with --serve)"
    )

    parser.add_argument(
        "--mime",
        type=str,
        default=None,
        help="Image MIME type (default: guessed from the file extension)"
    )

    parser.add_argument(
        "--show-ocr",
        action="store_true",
        help="Also print the recognized problem text"
    )

    parser.add_argument(
        "--serve",
        action="store_true",
        help="Start the HTTP API instead of analyzing a file"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: LOG_LEVEL setting)"
    )

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    if args.serve:
        serve(settings)
        return 0

    if not args.image:
        parser.error("an image path is required unless --serve is given")

    image_path = Path(args.image)
    if not image_path.is_file():
        logger.error(f"Image not found: {image_path}")
        return 1

    try:
        result = asyncio.run(analyze_file(image_path, settings, mime_type=args.mime))
    except Exception as e:
        logger.exception(f"Error during analysis: {e}")
        return 1

    if args.show_ocr:
        print(result.ocr_result)
        print()
    print(result.commands)
    return 0

