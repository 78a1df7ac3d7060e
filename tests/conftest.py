"""
Shared pytest fixtures for the img2ggb tests.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from backend.app.config import Settings


# ============================================================================
# Sample Data Fixtures
# ============================================================================

# Smallest valid PNG (1x1 transparent pixel)
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000000000500010d0a2db40000"
    "000049454e44ae426082"
)


@pytest.fixture
def png_bytes() -> bytes:
    """Return a tiny PNG image."""
    return PNG_BYTES


def make_message(content=None, reasoning_content=None):
    """Build an object shaped like an OpenAI chat completion message."""
    return SimpleNamespace(content=content, reasoning_content=reasoning_content)


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def demo_settings() -> Settings:
    """Settings without a key: both stages return their demo output."""
    return Settings(_env_file=None, ai_api_key=None, test_mode="", trusted_origins="")


@pytest.fixture
def live_settings() -> Settings:
    """Settings with a (fake) key so stages talk to the client."""
    return Settings(_env_file=None, ai_api_key="test_key_123", test_mode="", trusted_origins="")


# ============================================================================
# Mock Client Fixtures
# ============================================================================

@pytest.fixture
def mock_chat_client():
    """Mock provider client; set ``complete.return_value`` per test."""
    client = MagicMock()
    client.complete = AsyncMock(return_value=make_message("Test response"))
    return client
