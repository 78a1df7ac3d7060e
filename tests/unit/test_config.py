"""
Unit tests for Settings parsing from the environment.
"""

import pytest

from backend.app.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without provider key or test mode."""
    monkeypatch.delenv("AI_API_KEY", raising=False)
    monkeypatch.delenv("TEST_MODE", raising=False)
    return monkeypatch


class TestTestMode:

    @pytest.mark.parametrize("value", ["", "disabled", "false", "0", "yes"])
    def test_other_values_do_not_force_demo(self, clean_env, value):
        clean_env.setenv("AI_API_KEY", "sk-test")
        clean_env.setenv("TEST_MODE", value)

        settings = Settings(_env_file=None)

        assert settings.test_mode == value
        assert not settings.demo_mode

    @pytest.mark.parametrize("value", ["true", "TRUE", " true "])
    def test_true_forces_demo(self, clean_env, value):
        clean_env.setenv("AI_API_KEY", "sk-test")
        clean_env.setenv("TEST_MODE", value)
        assert Settings(_env_file=None).demo_mode

    def test_empty_test_mode_without_key(self, clean_env):
        clean_env.setenv("TEST_MODE", "")
        assert Settings(_env_file=None).demo_mode

    def test_empty_key_means_demo(self, clean_env):
        clean_env.setenv("AI_API_KEY", "")
        assert Settings(_env_file=None).demo_mode
