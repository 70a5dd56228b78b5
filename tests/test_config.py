"""Tests for MatcherConfig validation and environment loading."""

import pytest

from seqdfa.config import MatcherConfig, validate_positive_integer
from seqdfa.constants import DEFAULT_CONTEXT_LINES, MAX_CONTENT_SIZE, MAX_MATCHES
from seqdfa.types.errors import ConfigurationError, ErrorCode, ValidationError


class TestMatcherConfig:
    """Tests for MatcherConfig."""

    def test_defaults(self):
        config = MatcherConfig()
        assert config.context_lines == DEFAULT_CONTEXT_LINES
        assert config.max_content_size == MAX_CONTENT_SIZE
        assert config.max_matches == MAX_MATCHES
        assert config.ignore_case is False

    def test_zero_context_allowed(self):
        assert MatcherConfig(context_lines=0).context_lines == 0

    def test_negative_context_rejected(self):
        with pytest.raises(ValidationError, match="context_lines must be non-negative"):
            MatcherConfig(context_lines=-1)

    @pytest.mark.parametrize("field", ["max_content_size", "max_matches"])
    @pytest.mark.parametrize("value", [0, -5])
    def test_limits_must_be_positive(self, field, value):
        with pytest.raises(ValidationError, match=f"{field} must be positive"):
            MatcherConfig(**{field: value})

    def test_frozen(self):
        config = MatcherConfig()
        with pytest.raises(AttributeError):
            config.max_matches = 5


class TestFromEnv:
    """Tests for MatcherConfig.from_env."""

    def test_empty_environment_gives_defaults(self):
        assert MatcherConfig.from_env({}) == MatcherConfig()

    def test_overrides(self):
        config = MatcherConfig.from_env(
            {
                "SEQDFA_CONTEXT_LINES": "5",
                "SEQDFA_MAX_CONTENT_SIZE": "2048",
                "SEQDFA_MAX_MATCHES": "7",
                "SEQDFA_IGNORE_CASE": "true",
            }
        )
        assert config == MatcherConfig(
            context_lines=5, max_content_size=2048, max_matches=7, ignore_case=True
        )

    def test_blank_value_uses_default(self):
        assert MatcherConfig.from_env({"SEQDFA_MAX_MATCHES": "  "}).max_matches == MAX_MATCHES

    @pytest.mark.parametrize("raw", ["0", "false", "no", ""])
    def test_ignore_case_falsy(self, raw):
        assert MatcherConfig.from_env({"SEQDFA_IGNORE_CASE": raw}).ignore_case is False

    def test_non_integer_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            MatcherConfig.from_env({"SEQDFA_MAX_MATCHES": "lots"})

        err = exc_info.value
        assert err.code == ErrorCode.INVALID_CONFIG
        assert "SEQDFA_MAX_MATCHES" in err.user_message
        assert isinstance(err.original_error, ValueError)

    def test_out_of_range_raises_validation_error(self):
        with pytest.raises(ValidationError):
            MatcherConfig.from_env({"SEQDFA_CONTEXT_LINES": "-2"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("SEQDFA_CONTEXT_LINES", "4")
        assert MatcherConfig.from_env().context_lines == 4


class TestValidatePositiveInteger:
    def test_accepts_positive(self):
        validate_positive_integer(1, "n")

    def test_zero(self):
        validate_positive_integer(0, "n", allow_zero=True)
        with pytest.raises(ValidationError, match="n must be positive"):
            validate_positive_integer(0, "n")
