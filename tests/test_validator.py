"""
Tests for contact form validation.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from domain.errors import ValidationError
from domain.validator import validate


class TestValidateSuccess:
    """Test normalization of valid payloads."""

    def test_normalizes_email_and_defaults_subject(self):
        """Test email lowercasing and default subject."""
        result = validate({"name": "Ada", "email": "ADA@X.COM", "message": "Hello"})

        assert result.name == "Ada"
        assert result.email == "ada@x.com"
        assert result.subject == "No Subject"
        assert result.message == "Hello"

    def test_trims_all_fields(self):
        """Test surrounding whitespace is removed."""
        result = validate({
            "name": "  Ada  ",
            "email": " Ada@Example.com\n",
            "subject": "  Hi  ",
            "message": "\n  Hello\nWorld  \n"
        })

        assert result.name == "Ada"
        assert result.email == "ada@example.com"
        assert result.subject == "Hi"
        assert result.message == "Hello\nWorld"

    @pytest.mark.parametrize("subject", ["", "   ", None, 42])
    def test_blank_or_invalid_subject_defaults(self, subject):
        """Test subject is never a failure and never empty."""
        result = validate({"name": "Ada", "email": "a@b.com", "subject": subject, "message": "hi"})

        assert result.subject == "No Subject"


class TestValidateFailure:
    """Test rejection of invalid payloads."""

    def test_empty_name_rejected(self):
        """Test empty name is reported as missing."""
        with pytest.raises(ValidationError) as exc_info:
            validate({"name": "", "email": "a@b.com", "message": "hi"})

        assert exc_info.value.missing_fields == ["name"]

    def test_whitespace_only_name_rejected(self):
        """Test whitespace-only strings count as empty."""
        with pytest.raises(ValidationError) as exc_info:
            validate({"name": "   ", "email": "a@b.com", "message": "hi"})

        assert exc_info.value.missing_fields == ["name"]

    def test_all_missing_fields_reported(self):
        """Test every missing field is listed in order."""
        with pytest.raises(ValidationError) as exc_info:
            validate({"subject": "Only a subject"})

        assert exc_info.value.missing_fields == ["name", "email", "message"]

    @pytest.mark.parametrize("value", [123, ["a"], {"x": 1}, True])
    def test_non_text_field_rejected(self, value):
        """Test non-string required values are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate({"name": "Ada", "email": value, "message": "hi"})

        assert exc_info.value.missing_fields == ["email"]

    @pytest.mark.parametrize("raw", [None, [], "name=Ada", 42])
    def test_non_object_payload_rejected(self, raw):
        """Test payloads that are not JSON objects."""
        with pytest.raises(ValidationError):
            validate(raw)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
