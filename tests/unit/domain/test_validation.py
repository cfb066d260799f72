"""Unit tests for payload field contracts."""

from datetime import date

import pytest

from domain.validation import PayloadKind, validate


class TestProfileContract:
    def test_minimal_profile_is_valid(self):
        result = validate({"status": "Developer", "skills": "go,rust"}, "profile")

        assert result.is_valid
        assert result.errors == {}
        assert result.data == {"status": "Developer", "skills": "go,rust"}

    def test_missing_required_fields(self):
        result = validate({}, PayloadKind.PROFILE)

        assert not result.is_valid
        assert result.errors == {
            "status": "Status field is required",
            "skills": "Skills field is required",
        }

    def test_whitespace_only_counts_as_missing(self):
        result = validate({"status": "   ", "skills": "go"}, "profile")

        assert result.errors == {"status": "Status field is required"}

    @pytest.mark.parametrize("handle", ["a", "x" * 41])
    def test_handle_length_bounds(self, handle: str):
        result = validate({"handle": handle, "status": "Dev", "skills": "go"}, "profile")

        assert result.errors == {"handle": "Handle needs to be between 2 and 40 characters"}

    def test_empty_handle_is_treated_as_absent(self):
        result = validate({"handle": "", "status": "Dev", "skills": "go"}, "profile")

        assert result.is_valid
        assert result.data["handle"] is None

    @pytest.mark.parametrize("field", ["website", "twitter", "linkedin"])
    def test_rejects_malformed_urls(self, field: str):
        result = validate({field: "not a url", "status": "Dev", "skills": "go"}, "profile")

        assert result.errors == {field: "Not a valid URL"}

    def test_accepts_url_without_scheme(self):
        result = validate(
            {
                "website": "ada.dev",
                "youtube": "https://youtube.com/@ada",
                "status": "Dev",
                "skills": "go",
            },
            "profile",
        )

        assert result.is_valid
        assert result.data["website"] == "ada.dev"

    def test_unknown_fields_are_ignored(self):
        result = validate({"status": "Dev", "skills": "go", "role": "admin"}, "profile")

        assert result.is_valid
        assert "role" not in result.data

    def test_non_text_value_is_reported(self):
        result = validate({"status": 42, "skills": "go"}, "profile")

        assert result.errors == {"status": "Status must be text"}


class TestExperienceContract:
    def test_valid_experience_uses_entity_field_names(self):
        result = validate(
            {"title": "Engineer", "company": "Acme", "from": "2020-01-01", "current": "true"},
            "experience",
        )

        assert result.is_valid
        assert result.data == {
            "title": "Engineer",
            "company": "Acme",
            "from_date": date(2020, 1, 1),
            "current": True,
        }

    def test_errors_are_keyed_by_payload_field(self):
        result = validate({"from": "yesterday-ish"}, "experience")

        assert result.errors == {
            "title": "Job title field is required",
            "company": "Company field is required",
            "from": "From date is not a valid date",
        }

    def test_misspelled_kind_is_accepted(self):
        payload = {"title": "Engineer", "company": "Acme", "from": "2020-01-01"}

        result = validate(payload, "expirience")

        assert result.is_valid

    def test_bad_current_flag(self):
        result = validate(
            {"title": "Engineer", "company": "Acme", "from": "2020-01-01", "current": "maybe"},
            "experience",
        )

        assert result.errors == {"current": "Current must be true or false"}

    def test_missing_from_is_keyed_by_payload_name(self):
        result = validate({"title": "Engineer", "company": "Acme"}, "experience")

        assert result.errors == {"from": "From date field is required"}


class TestEducationContract:
    def test_missing_from_is_keyed_by_payload_name(self):
        result = validate({"school": "MIT", "degree": "BSc", "fieldofstudy": "CS"}, "education")

        assert result.errors == {"from": "From date field is required"}

    def test_missing_fields(self):
        result = validate({"from": "2015-09-01"}, "education")

        assert result.errors == {
            "school": "School field is required",
            "degree": "Degree field is required",
            "fieldofstudy": "Field of study field is required",
        }

    def test_invalid_to_date(self):
        result = validate(
            {
                "school": "MIT",
                "degree": "BSc",
                "fieldofstudy": "CS",
                "from": "2015-09-01",
                "to": "someday",
            },
            "education",
        )

        assert result.errors == {"to": "To date is not a valid date"}


class TestPostContract:
    def test_valid_post(self):
        result = validate({"text": "hi", "name": "Ada", "avatar": "a.png"}, "post")

        assert result.is_valid

    @pytest.mark.parametrize("text", ["x", "x" * 301])
    def test_text_length_bounds(self, text: str):
        result = validate({"text": text, "name": "Ada", "avatar": "a.png"}, "post")

        assert result.errors == {"text": "Post must be between 2 and 300 characters"}

    def test_text_at_upper_bound_is_valid(self):
        result = validate({"text": "x" * 300, "name": "Ada", "avatar": "a.png"}, "post")

        assert result.is_valid

    def test_missing_text(self):
        result = validate({"name": "Ada", "avatar": "a.png"}, "post")

        assert result.errors == {"text": "Text field is required"}


class TestValidateEntryPoint:
    def test_non_object_payload(self):
        result = validate(["status"], "profile")

        assert not result.is_valid
        assert result.errors == {"payload": "Payload must be an object"}

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            validate({}, "comment-thread")
