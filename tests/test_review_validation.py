"""Tests for validate_review_fields."""

import pytest

from src.services.review_validation import validate_review_fields


class TestValidateReviewFields:
    @pytest.fixture
    def fields(self):
        return {
            "bookTitle": "Neuromancer",
            "author": "William Gibson",
            "rating": 4,
            "reviewText": "Dense prose, but the atmosphere carries it.",
        }

    def test_valid_fields(self, fields):
        """Test a complete review passes and keeps its values."""
        result = validate_review_fields(fields)

        assert result.ok is True
        assert result.errors == []
        assert result.values == fields

    @pytest.mark.parametrize("rating", [1, 5, 3.0, " 2 "])
    def test_rating_bounds_inclusive(self, fields, rating):
        """Test 1 and 5 are allowed and whole-number values are coerced."""
        result = validate_review_fields({**fields, "rating": rating})

        assert result.ok is True
        assert isinstance(result.values["rating"], int)

    def test_out_of_range_message(self, fields):
        """Test the range error names the allowed bounds."""
        result = validate_review_fields({**fields, "rating": 6})

        assert result.ok is False
        assert result.errors[0].field == "rating"
        assert result.errors[0].message == "must be between 1 and 5"
        assert "rating" not in result.values

    def test_blank_text_is_missing(self, fields):
        """Test whitespace-only text counts as missing."""
        result = validate_review_fields({**fields, "reviewText": "   "})

        assert [(error.field, error.message) for error in result.errors] == [("reviewText", "is required")]

    def test_non_text_title(self, fields):
        """Test a non-string title is rejected."""
        result = validate_review_fields({**fields, "bookTitle": 42})

        assert result.errors[0].field == "bookTitle"
        assert result.errors[0].message == "must be text"

    def test_partial_skips_missing_fields(self):
        """Test partial validation only checks the fields that are present."""
        result = validate_review_fields({"rating": 2}, partial=True)

        assert result.ok is True
        assert result.values == {"rating": 2}

    def test_partial_still_checks_range(self):
        """Test partial validation keeps the rating range."""
        result = validate_review_fields({"rating": 0}, partial=True)

        assert result.ok is False
