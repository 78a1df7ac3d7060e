"""
Command-line entry point for img2ggb.
Runs the analysis pipeline on a local image, or starts the API server.

Usage:
    python main.py problem.png --show-ocr
    python main.py --serve
"""

import sys

from backend.app.cli import main

if __name__ == "__main__":
    sys.exit(main())
