"""
Unit tests for the account vocabulary and its YAML loader.
"""

import os

import pytest
from pydantic import ValidationError

from account_sync.core.vocabulary import (
    DEFAULT_STATUSES,
    DEFAULT_TAGS,
    DEFAULT_VOCABULARY,
    AccountVocabulary,
)

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))


@pytest.mark.unit
class TestAccountVocabulary:
    """Tests for AccountVocabulary"""

    def test_builtin_sets(self):
        assert DEFAULT_VOCABULARY.default_status == "New"
        assert len(DEFAULT_STATUSES) == 7
        assert len(DEFAULT_TAGS) == 22
        assert "Closed-Won" in DEFAULT_VOCABULARY.statuses
        assert "Zone Controller" in DEFAULT_VOCABULARY.tags
        assert "zone controller" not in DEFAULT_VOCABULARY.tags

    def test_default_status_must_be_a_status(self):
        with pytest.raises(ValidationError) as exc_info:
            AccountVocabulary(statuses=("Open", "Closed"), default_status="New")
        assert "default_status" in str(exc_info.value)

    def test_statuses_cannot_be_empty(self):
        with pytest.raises(ValidationError):
            AccountVocabulary(statuses=(), default_status="New")

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_VOCABULARY.default_status = "Hot"


@pytest.mark.unit
class TestVocabularyFromYaml:
    """Tests for loading a vocabulary from YAML"""

    def test_shipped_config_matches_builtin(self):
        vocabulary = AccountVocabulary.from_yaml(os.path.join(ROOT_DIR, "config", "account_vocabulary.yaml"))
        assert vocabulary == DEFAULT_VOCABULARY

    def test_partial_override(self, tmp_path):
        config = tmp_path / "vocab.yaml"
        config.write_text("tags:\n  - Robotics\n  - AI\n", encoding="utf-8")

        vocabulary = AccountVocabulary.from_yaml(config)

        assert vocabulary.tags == ("Robotics", "AI")
        assert vocabulary.statuses == DEFAULT_STATUSES

    def test_custom_default_status(self, tmp_path):
        config = tmp_path / "vocab.yaml"
        config.write_text("default_status: Open\nstatuses: [Open, Closed]\n", encoding="utf-8")

        vocabulary = AccountVocabulary.from_yaml(config)

        assert vocabulary.default_status == "Open"
        assert vocabulary.statuses == ("Open", "Closed")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AccountVocabulary.from_yaml(tmp_path / "missing.yaml")

    def test_list_required(self, tmp_path):
        config = tmp_path / "vocab.yaml"
        config.write_text("tags: Robotics\n", encoding="utf-8")

        with pytest.raises(ValueError, match="'tags' must be a list"):
            AccountVocabulary.from_yaml(config)

    def test_empty_file_uses_builtin(self, tmp_path):
        config = tmp_path / "vocab.yaml"
        config.write_text("", encoding="utf-8")

        assert AccountVocabulary.from_yaml(config) == DEFAULT_VOCABULARY
