"""Tests for configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from codeoutline.config.models import (
    CodeOutlineConfig,
    LimitsConfig,
    LoggingConfig,
    OutlineConfig,
)


class TestDefaults:
    def test_root_defaults(self) -> None:
        config = CodeOutlineConfig()

        assert config.logging == LoggingConfig()
        assert config.outline.member_depth == 1
        assert config.outline.markup is True
        assert config.outline.implicit_file_module is True
        assert config.outline.signature_max_length == 120
        assert config.limits.outline_max_lines == 200

    def test_single_stderr_console_output(self) -> None:
        outputs = LoggingConfig().outputs

        assert len(outputs) == 1
        assert outputs[0].destination == "stderr"
        assert outputs[0].format == "console"


class TestOutlineConfig:
    @pytest.mark.parametrize("depth", [0, 1, 4])
    def test_member_depth_in_range(self, depth: int) -> None:
        assert OutlineConfig(member_depth=depth).member_depth == depth

    @pytest.mark.parametrize("depth", [-1, 5])
    def test_member_depth_out_of_range(self, depth: int) -> None:
        with pytest.raises(ValidationError):
            OutlineConfig(member_depth=depth)

    def test_signature_length_minimum(self) -> None:
        with pytest.raises(ValidationError):
            OutlineConfig(signature_max_length=3)


class TestLimitsConfig:
    @pytest.mark.parametrize("field", ["max_file_size_mb", "outline_max_lines"])
    def test_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError):
            LimitsConfig(**{field: 0})


class TestLoggingConfig:
    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")
