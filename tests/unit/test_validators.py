"""
Unit tests for row validators.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from account_sync.core.validators import (
    AllowedValueValidator,
    RequiredFieldValidator,
    TagSetValidator,
    ValidationError,
)
from account_sync.core.vocabulary import DEFAULT_STATUSES, DEFAULT_TAGS


@pytest.mark.unit
class TestRequiredFieldValidator:
    """Tests for RequiredFieldValidator"""

    def test_first_alias_wins(self):
        validator = RequiredFieldValidator("company_name", {"aliases": ["company_name", "name", "company"]})
        record = {"company_name": "Acme", "name": "Other", "company": "Third"}
        assert validator.validate(record) == "Acme"

    def test_falls_through_empty_aliases(self):
        validator = RequiredFieldValidator("company_name", {"aliases": ["company_name", "name", "company"]})
        record = {"company_name": None, "name": "  ", "company": "Globex"}
        assert validator.validate(record) == "Globex"

    def test_missing_all_aliases_raises(self):
        validator = RequiredFieldValidator("company_name", {"aliases": ["company_name", "name", "company"]})

        with pytest.raises(ValidationError) as exc_info:
            validator.validate({"email": "a@b.example"})

        assert exc_info.value.field_name == "company_name"
        assert exc_info.value.message == "Missing company_name"
        assert validator.rule_type == "required_field"

    def test_defaults_to_own_field_name(self):
        validator = RequiredFieldValidator("email")
        assert validator.aliases == ["email"]
        assert validator.validate({"email": "x@y.example"}) == "x@y.example"

    @given(st.text(min_size=1).filter(lambda s: s.strip() != ""))
    def test_property_any_nonempty_string_passes(self, value):
        """Property test: any non-blank value is returned unchanged"""
        validator = RequiredFieldValidator("name")
        assert validator.validate({"name": value}) == value


@pytest.mark.unit
class TestAllowedValueValidator:
    """Tests for AllowedValueValidator"""

    def test_known_value_kept(self):
        validator = AllowedValueValidator("status", {"allowed": DEFAULT_STATUSES, "default": "New"})
        assert validator.validate({"status": "Hot"}) == "Hot"

    def test_unknown_value_defaults(self):
        validator = AllowedValueValidator("status", {"allowed": DEFAULT_STATUSES, "default": "New"})
        assert validator.validate({"status": "Bogus"}) == "New"

    def test_case_sensitive(self):
        validator = AllowedValueValidator("status", {"allowed": DEFAULT_STATUSES, "default": "New"})
        assert validator.validate({"status": "hot"}) == "New"

    def test_missing_value_defaults(self):
        validator = AllowedValueValidator("status", {"allowed": DEFAULT_STATUSES, "default": "New"})
        assert validator.validate({}) == "New"

    def test_requires_allowed_parameter(self):
        with pytest.raises(ValueError, match="allowed"):
            AllowedValueValidator("status", {})


@pytest.mark.unit
class TestTagSetValidator:
    """Tests for TagSetValidator"""

    def test_mixed_separators_and_unknown_tag(self):
        validator = TagSetValidator("tags", {"allowed": DEFAULT_TAGS})
        assert validator.validate({"tags": "AUTOSAR; BSW, Unknown"}) == ["AUTOSAR", "BSW"]

    def test_order_preserved(self):
        validator = TagSetValidator("tags", {"allowed": DEFAULT_TAGS})
        assert validator.validate({"tags": "OTA;FuSa"}) == ["OTA", "FuSa"]

    def test_tags_with_spaces_and_symbols(self):
        validator = TagSetValidator("tags", {"allowed": DEFAULT_TAGS})
        result = validator.validate({"tags": "V&V Testing;CI/CD; µC/HW"})
        assert result == ["V&V Testing", "CI/CD", "µC/HW"]

    def test_no_recognized_tags_is_none(self):
        validator = TagSetValidator("tags", {"allowed": DEFAULT_TAGS})
        assert validator.validate({"tags": "Unknown;Other"}) is None

    def test_missing_field_is_none(self):
        validator = TagSetValidator("tags", {"allowed": DEFAULT_TAGS})
        assert validator.validate({"tags": None}) is None
        assert validator.validate({}) is None

    @given(st.lists(st.sampled_from(DEFAULT_TAGS), min_size=1, max_size=5), st.sampled_from([",", ";", " ; ", ", "]))
    def test_property_known_tags_survive_any_separator(self, tags, separator):
        """Property test: recognized tags are kept whatever separator joins them"""
        validator = TagSetValidator("tags", {"allowed": DEFAULT_TAGS})
        assert validator.validate({"tags": separator.join(tags)}) == tags
