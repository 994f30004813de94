"""
Unit tests for configuration loading.
"""

import re
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest
import yaml

from word_censor.config import (
    Config,
    FilterConfig,
    ListConfig,
    LoggingConfig,
    DEFAULT_NORMALIZE_REGEX,
    DEFAULT_REDACT_REGEX,
)
from word_censor.error_handler import InvalidInputError
from word_censor.profanity import ProfanityFilter


class TestConfigDefaults:
    """Test default configuration values."""

    def test_default_filter_config(self):
        config = FilterConfig()

        assert config.placeholder == "*"
        assert config.normalize_pattern.pattern == DEFAULT_NORMALIZE_REGEX
        assert config.redact_pattern.pattern == DEFAULT_REDACT_REGEX

    def test_default_list_config(self):
        config = ListConfig()

        assert config.empty_list is False
        assert config.words is None
        assert config.add_words == []
        assert config.exclude == []
        assert config.custom_wordlist_path == ""

    def test_default_logging_config(self):
        config = LoggingConfig()

        assert config.level == "INFO"
        assert config.log_file == ""


class TestFilterConfig:
    def test_is_immutable(self):
        config = FilterConfig()
        with pytest.raises(FrozenInstanceError):
            config.placeholder = "#"

    def test_accepts_compiled_patterns(self):
        pattern = re.compile(r"\d")
        config = FilterConfig(redact_regex=pattern)
        assert config.redact_pattern is pattern

    def test_rejects_bad_placeholder(self):
        with pytest.raises(InvalidInputError):
            FilterConfig(placeholder="ab")
        with pytest.raises(InvalidInputError):
            FilterConfig(placeholder=None)

    def test_rejects_bad_regex(self):
        with pytest.raises(InvalidInputError):
            FilterConfig(redact_regex="(")
        with pytest.raises(InvalidInputError):
            FilterConfig(normalize_regex=5)


class TestConfigLoad:
    """Test configuration loading from files."""

    def test_load_no_path(self):
        config = Config.load()
        assert config.filter.placeholder == "*"

    def test_load_nonexistent_file(self):
        config = Config.load(Path("/nonexistent/config.yaml"))
        assert config.filter.placeholder == "*"
        assert config.lists.empty_list is False

    def test_load_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        config = Config.load(path)
        assert config.filter.placeholder == "*"

    def test_load_partial_config(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "filter:\n"
            "  placeholder: '#'\n"
            "lists:\n"
            "  add_words: [zzzextra]\n"
            "  exclude: [jerk]\n"
            "  unknown_key: 1\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = Config.load(path)

        assert config.filter.placeholder == "#"
        assert config.filter.redact_pattern.pattern == DEFAULT_REDACT_REGEX
        assert config.lists.add_words == ["zzzextra"]
        assert config.lists.exclude == ["jerk"]
        assert not hasattr(config.lists, "unknown_key")
        assert config.logging.level == "DEBUG"

    def test_load_invalid_placeholder(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("filter:\n  placeholder: '##'\n")

        with pytest.raises(InvalidInputError):
            Config.load(path)

    def test_load_empty_sections(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("filter:\nlists:\nlogging:\n")

        config = Config.load(path)
        assert config.filter == FilterConfig()


class TestConfigSave:
    def test_save_and_reload(self, tmp_path):
        config = Config()
        config.filter = FilterConfig(placeholder="-", redact_regex=r"[a-z]")
        config.lists.words = ["foo", "bar"]
        config.lists.exclude = ["bar"]
        path = tmp_path / "config.yaml"

        config.save(path)
        data = yaml.safe_load(path.read_text())
        loaded = Config.load(path)

        assert data["filter"]["placeholder"] == "-"
        assert loaded.filter.placeholder == "-"
        assert loaded.filter.redact_pattern.pattern == "[a-z]"
        assert loaded.lists.words == ["foo", "bar"]
        assert loaded.lists.exclude == ["bar"]


class TestFilterFromConfig:
    def test_uses_filter_settings(self):
        config = Config()
        config.filter = FilterConfig(placeholder="#")

        profanity_filter = ProfanityFilter.from_config(config)
        assert profanity_filter.clean("you are a jerk") == "you are a ####"

    def test_reads_wordlist_and_exclude_files(self, tmp_path):
        words = tmp_path / "words.txt"
        words.write_text("zzzcustom\n")
        exclude = tmp_path / "exclude.txt"
        exclude.write_text("jerk\n")

        config = Config()
        config.lists.custom_wordlist_path = str(words)
        config.lists.exclude_path = str(exclude)

        profanity_filter = ProfanityFilter.from_config(config)
        assert profanity_filter.is_profane_word("zzzcustom") is True
        assert profanity_filter.is_profane_word("jerk") is False

    def test_missing_exclude_file_ignored(self, tmp_path):
        config = Config()
        config.lists.exclude_path = str(tmp_path / "missing.txt")

        profanity_filter = ProfanityFilter.from_config(config)
        assert profanity_filter.exclusions == []

    def test_explicit_word_list(self):
        config = Config()
        config.lists.words = ["foo"]

        profanity_filter = ProfanityFilter.from_config(config)
        assert profanity_filter.words == ["foo"]
