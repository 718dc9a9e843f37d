"""Tests for the configuration models."""

import pytest
from pydantic import ValidationError

from tzstamp.config.models import ConvertConfig


class TestConvertConfig:
    def test_defaults(self) -> None:
        cfg = ConvertConfig()
        assert cfg.default_timezone == "Z"
        assert cfg.use_milliseconds is False

    def test_override(self) -> None:
        cfg = ConvertConfig(default_timezone="Asia/Kolkata", use_milliseconds=True)
        assert cfg.default_timezone == "Asia/Kolkata"
        assert cfg.use_milliseconds is True

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_timezone_rejected(self, blank: str) -> None:
        with pytest.raises(ValidationError, match="must not be blank"):
            ConvertConfig(default_timezone=blank)

    def test_frozen(self) -> None:
        cfg = ConvertConfig()
        with pytest.raises(ValidationError):
            cfg.use_milliseconds = True  # type: ignore[misc]

