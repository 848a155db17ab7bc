"""
Tests for the validation entry points and violation translation.
"""
import pytest

from bestchoice.exceptions import RequestValidationFailed
from bestchoice.types import KeywordCreateRequest, PreferenceCreateRequest, SkillCreateRequest
from bestchoice.validation import (
    InvalidType,
    LengthExceeded,
    RangeViolation,
    RequiredFieldMissing,
    parse,
    validate,
    violations_from_errors,
)


class TestValidate:
    """Tests for validate() on mappings, JSON documents and instances."""

    def test_json_payload(self):
        """Test that a valid JSON document passes."""
        assert validate(KeywordCreateRequest, '{"label": "Web"}') == []

    def test_json_payload_with_violation(self):
        """Test that a JSON document is range checked."""
        violations = validate(PreferenceCreateRequest, b'{"studentId": 1, "projectId": 2, "rank": 0}')
        assert isinstance(violations[0], RangeViolation)
        assert violations[0].message == "Le rank doit être >= 1"

    def test_json_booleans_are_not_ids(self):
        """Test that JSON booleans are rejected for ids and rank."""
        violations = validate(
            PreferenceCreateRequest, '{"studentId": true, "projectId": 2, "rank": true}'
        )
        assert {(type(v), v.field) for v in violations} == {
            (InvalidType, "studentId"),
            (InvalidType, "rank"),
        }

    def test_malformed_json(self):
        """Test that malformed JSON gives a single type violation."""
        violations = validate(KeywordCreateRequest, "{label")
        assert len(violations) == 1
        assert isinstance(violations[0], InvalidType)

    def test_instance_is_valid(self):
        """Test that an existing instance validates cleanly."""
        request = SkillCreateRequest(name="Python", level=4)
        assert validate(SkillCreateRequest, request) == []

    def test_validation_is_repeatable(self):
        """Test that validating twice gives the same result and leaves the payload alone."""
        payload = {"label": ""}
        assert validate(KeywordCreateRequest, payload) == validate(KeywordCreateRequest, payload)
        assert payload == {"label": ""}


class TestParse:
    """Tests for parse() returning the instance or rejecting the whole request."""

    def test_returns_instance(self, sample_preference_payload):
        """Test that a valid payload returns the model instance."""
        request = parse(PreferenceCreateRequest, sample_preference_payload)
        assert request.student_id == 12
        assert request.rank == 1

    def test_raises_with_every_violation(self):
        """Test that the raised error carries every violation."""
        with pytest.raises(RequestValidationFailed) as exc_info:
            parse(SkillCreateRequest, {"name": "n" * 200, "level": 0})

        exc = exc_info.value
        assert exc.model_name == "SkillCreateRequest"
        assert {type(v) for v in exc.violations} == {LengthExceeded, RangeViolation}
        assert exc.status_code == 400
        assert exc.error_code == "VALIDATION_ERROR"

    def test_details_map_fields_to_messages(self):
        """Test that details map each field to its message."""
        with pytest.raises(RequestValidationFailed) as exc_info:
            parse(KeywordCreateRequest, {"label": " ", "domain": "d" * 60})

        assert exc_info.value.details() == {
            "fields": {
                "label": "Le libellé du mot-clé est obligatoire",
                "domain": "Le domaine ne doit pas dépasser 50 caractères",
            }
        }


class TestViolationsFromErrors:
    """Tests for translation without a model."""

    def test_default_messages(self):
        """Test that default messages are used without a model."""
        errors = [
            {"type": "missing", "loc": ("title",), "input": {}},
            {"type": "string_too_long", "loc": ("summary",), "input": "x" * 12, "ctx": {"max_length": 10}},
        ]

        violations = violations_from_errors(errors)

        assert violations[0] == RequiredFieldMissing(field="title", message="title est obligatoire")
        assert violations[1] == LengthExceeded(
            field="summary",
            message="summary ne doit pas dépasser 10 caractères",
            max_length=10,
            actual_length=12,
        )

    def test_bound_specific_message(self):
        """Test that the broken bound selects the message."""
        low = {"type": "greater_than_equal", "loc": ("rank",), "input": 0, "ctx": {"ge": 1}}
        high = {"type": "less_than_equal", "loc": ("rank",), "input": 11, "ctx": {"le": 10}}

        violations = violations_from_errors([low, high], PreferenceCreateRequest)

        assert [v.message for v in violations] == ["Le rank doit être >= 1", "Le rank doit être <= 10"]
        assert all((v.minimum, v.maximum) == (1, 10) for v in violations)

    def test_nested_location(self):
        """Test that nested locations are joined with dots."""
        errors = [{"type": "int_parsing", "loc": ("items", 0, "rank"), "input": "x"}]
        assert violations_from_errors(errors)[0].field == "items.0.rank"

    def test_rule_tags(self):
        """Test the rule tag of each variant."""
        assert RequiredFieldMissing.rule == "required"
        assert LengthExceeded.rule == "max-length"
        assert RangeViolation.rule == "range"
        assert InvalidType.rule == "type"
