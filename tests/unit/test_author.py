"""
Unit tests for author validation.
"""
import pytest

from comment_guard.validation.author import validate_author


class TestValidateAuthor:
    def test_valid_author(self, valid_author):
        result = validate_author(valid_author)
        assert result.is_valid is True
        assert result.sanitized["email"] == "bob@x.com"
        assert result.sanitized["name"] == "Bob"

    def test_normalises_name_and_email(self, messy_author):
        result = validate_author(messy_author)
        assert result.is_valid is True
        assert result.sanitized == {"name": "Jane Doe-Smith", "email": "jane.doe@example.com"}

    @pytest.mark.parametrize("author", [None, "bob", 3, ["Bob", "bob@x.com"]])
    def test_requires_mapping(self, author):
        result = validate_author(author)
        assert result.is_valid is False
        assert result.errors == ["Author information is required"]
        assert result.sanitized == {"name": "", "email": ""}

    def test_empty_mapping_reports_both_fields(self):
        result = validate_author({})
        assert result.errors == ["Author name is required", "Author email is required"]

    def test_blank_name(self):
        result = validate_author({"name": "   ", "email": "bob@x.com"})
        assert result.errors == ["Author name cannot be empty"]

    def test_name_too_long(self):
        result = validate_author({"name": "a" * 51, "email": "bob@x.com"})
        assert result.errors == ["Author name cannot exceed 50 characters"]

    def test_name_at_limit(self):
        assert validate_author({"name": "a" * 50, "email": "bob@x.com"}).is_valid is True

    @pytest.mark.parametrize("name", ["Bob<script>", "Zoë", "bob@home", "Bob!"])
    def test_name_invalid_characters(self, name):
        result = validate_author({"name": name, "email": "bob@x.com"})
        assert result.errors == ["Author name contains invalid characters"]

    def test_invalid_email(self):
        result = validate_author({"name": "Bob", "email": "not-an-email"})
        assert result.errors == ["Invalid email address"]

    def test_non_string_fields(self):
        result = validate_author({"name": 42, "email": ["bob@x.com"]})
        assert result.errors == ["Author name is required", "Author email is required"]
        assert result.sanitized == {"name": "", "email": ""}

    def test_errors_accumulate_across_fields(self):
        result = validate_author({"name": "Bob!", "email": "bob"})
        assert len(result.errors) == 2
