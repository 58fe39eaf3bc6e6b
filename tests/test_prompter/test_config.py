"""Tests for PrompterConfig."""

from __future__ import annotations

import pytest

from prompter.config import PrompterConfig


class TestPrompterConfig:
    def test_defaults(self) -> None:
        config = PrompterConfig()
        assert config.separator == " "
        assert config.password_newline is True
        assert config.read_thread_name == "prompter-read"

    def test_from_env(self) -> None:
        config = PrompterConfig.from_env({
            "PROMPTER_SEPARATOR": ": ",
            "PROMPTER_PASSWORD_NEWLINE": "off",
            "PROMPTER_ENCODING": "latin-1",
        })
        assert config.separator == ": "
        assert config.password_newline is False
        assert config.encoding == "latin-1"

    def test_from_env_empty(self) -> None:
        assert PrompterConfig.from_env({}) == PrompterConfig()

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            PrompterConfig().separator = ">"  # type: ignore[misc]
