"""Unit tests for domain value objects."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from miniblog.domain.model import Post
from miniblog.domain.value import CategoryName, TagName, parse_key


class TestParseKey:
    """Tests for parse_key."""

    def test_valid_key(self):
        key = uuid4()

        assert parse_key(str(key)) == key
        assert parse_key(f"  {key}  ") == key
        assert parse_key(key) == key

    @pytest.mark.parametrize("value", [None, "", "   ", "123", "not-a-uuid"])
    def test_invalid_key_is_none(self, value):
        assert parse_key(value) is None


class TestNames:
    """Tests for TagName and CategoryName."""

    def test_names_are_lower_cased_and_stripped(self):
        assert TagName("  Python ").root == "python"
        assert str(CategoryName("News")) == "news"

    def test_case_variants_are_equal(self):
        assert TagName("Python") == TagName("PYTHON")

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValidationError):
            TagName("   ")

    def test_post_rejects_duplicate_names(self):
        """A post carries each tag at most once."""
        with pytest.raises(ValidationError):
            Post(tags=[TagName("a"), TagName("A")])
