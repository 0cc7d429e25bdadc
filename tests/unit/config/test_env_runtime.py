"""Tests for environment-backed configuration helpers."""

import pytest

from seqstream.config import ConfigurationError, env_bool, env_int, env_name, env_str
from seqstream.config import runtime


def test_env_name_adds_prefix() -> None:
    assert env_name("LOG_LEVEL") == "SEQSTREAM_LOG_LEVEL"


class TestEnvStr:
    def test_returns_stripped_value(self, monkeypatch) -> None:
        monkeypatch.setenv("SEQSTREAM_NAME", "  feed  ")

        assert env_str("NAME", "default") == "feed"

    def test_blank_uses_default(self, monkeypatch) -> None:
        monkeypatch.setenv("SEQSTREAM_NAME", "   ")

        assert env_str("NAME", "fallback") == "fallback"

    def test_unprefixed_variable_is_ignored(self, monkeypatch) -> None:
        monkeypatch.setenv("NAME", "feed")

        assert env_str("NAME", "default") == "default"


class TestEnvInt:
    def test_parses_integer(self, monkeypatch) -> None:
        monkeypatch.setenv("SEQSTREAM_COUNT", "42")

        assert env_int("COUNT", 0) == 42

    def test_invalid_integer_raises(self, monkeypatch) -> None:
        monkeypatch.setenv("SEQSTREAM_COUNT", "forty")

        with pytest.raises(ConfigurationError, match="SEQSTREAM_COUNT has invalid format") as exc_info:
            env_int("COUNT", 0)

        assert exc_info.value.setting == "SEQSTREAM_COUNT"

    def test_missing_returns_default(self) -> None:
        assert env_int("COUNT", 3) == 3

    def test_below_minimum_raises(self, monkeypatch) -> None:
        monkeypatch.setenv("SEQSTREAM_COUNT", "-1")

        with pytest.raises(ConfigurationError, match="Must be at least 0"):
            env_int("COUNT", 3, minimum=0)

    def test_minimum_is_inclusive(self, monkeypatch) -> None:
        monkeypatch.setenv("SEQSTREAM_COUNT", "0")

        assert env_int("COUNT", 3, minimum=0) == 0


class TestEnvBool:
    @pytest.mark.parametrize(("raw", "expected"), [("yes", True), ("ON", True), ("0", False), ("off", False)])
    def test_parses_boolean_words(self, monkeypatch, raw, expected) -> None:
        monkeypatch.setenv("SEQSTREAM_FLAG", raw)

        assert env_bool("FLAG", not expected) is expected

    def test_invalid_boolean_raises(self, monkeypatch) -> None:
        monkeypatch.setenv("SEQSTREAM_FLAG", "maybe")

        with pytest.raises(ConfigurationError, match="Expected a boolean"):
            env_bool("FLAG", False)


class TestDotenvFallback:
    """Tests for .env fallback values."""

    def test_environment_wins_over_dotenv(self, monkeypatch, tmp_path) -> None:
        first = tmp_path / "first.env"
        second = tmp_path / "second.env"
        first.write_text("SEQSTREAM_NAME=from-first\n", encoding="utf-8")
        second.write_text("SEQSTREAM_NAME=from-second\nSEQSTREAM_OTHER=other\nUNRELATED=x\n", encoding="utf-8")
        monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (first, second))
        monkeypatch.setattr(runtime, "_DOTENV_VALUES", None)

        assert env_str("NAME", "default") == "from-first"
        assert env_str("OTHER", "default") == "other"
        assert "UNRELATED" not in runtime._dotenv_values()

        monkeypatch.setenv("SEQSTREAM_NAME", "from-env")
        assert env_str("NAME", "default") == "from-env"

    def test_missing_files_are_ignored(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (tmp_path / "absent.env",))
        monkeypatch.setattr(runtime, "_DOTENV_VALUES", None)

        assert env_str("NAME", "default") == "default"
