"""Unit tests for interactor.adapters.validation."""

import pytest
from pydantic import BaseModel, Field, model_validator

from interactor.adapters.validation import (
    BASE_ERROR_KEY,
    PydanticValidator,
    ValidationResult,
)
from interactor.domain.parameters import ParameterBag
from interactor.interfaces.validator import ValidationReport

# pylint: disable=magic-value-comparison
# pylint: disable=too-few-public-methods


class PostParams(BaseModel):
    """Parameters accepted by a create-post service."""

    title: str = Field(min_length=1)
    body: str = ""


class WindowParams(BaseModel):
    """Parameters with a cross-field rule."""

    start: int
    end: int

    @model_validator(mode="after")
    def check_order(self) -> "WindowParams":
        """Require start <= end."""
        if self.start > self.end:
            raise ValueError("start must not be after end")
        return self


class TestValidationResult:
    """Tests for the plain ValidationResult report."""

    @staticmethod
    def test_ok_is_not_a_failure():
        """An empty report passes."""
        report = ValidationResult.ok()
        assert not report.is_failure()
        assert report.errors() == {}

    @staticmethod
    def test_messages_make_it_a_failure():
        """Any message makes the report a failure."""
        report = ValidationResult({"title": ["is required"]})
        assert report.is_failure()
        assert report.errors() == {"title": ["is required"]}

    @staticmethod
    def test_empty_message_lists_are_dropped():
        """Fields with no messages do not count."""
        report = ValidationResult({"title": []})
        assert not report.is_failure()

    @staticmethod
    def test_report_is_immutable():
        """Messages cannot be changed after construction."""
        source = {"title": ["is required"]}
        report = ValidationResult(source)
        source["title"].append("is too short")
        assert report.errors() == {"title": ["is required"]}
        with pytest.raises(TypeError):
            report.messages["body"] = ("x",)  # type: ignore[index]

    @staticmethod
    def test_satisfies_report_protocol():
        """ValidationResult is a ValidationReport."""
        assert isinstance(ValidationResult(), ValidationReport)


class TestPydanticValidator:
    """Tests for the pydantic-backed validator."""

    @staticmethod
    def test_valid_params_pass():
        """A bag satisfying the model passes."""
        report = PydanticValidator(PostParams)(ParameterBag(title="Hi", body="There"))
        assert not report.is_failure()

    @staticmethod
    def test_field_errors_are_keyed_by_field():
        """Field errors are grouped under the field name."""
        report = PydanticValidator(PostParams)(ParameterBag(title=""))
        assert report.is_failure()
        errors = report.errors()
        assert list(errors) == ["title"]
        assert len(errors["title"]) == 1

    @staticmethod
    def test_missing_field_is_reported():
        """A missing required field is reported under its name."""
        errors = PydanticValidator(PostParams)(ParameterBag()).errors()
        assert errors["title"] == ["Field required"]

    @staticmethod
    def test_model_level_errors_use_base_key():
        """Errors not tied to a field go under the base key."""
        errors = PydanticValidator(WindowParams)(ParameterBag(start=2, end=1)).errors()
        assert list(errors) == [BASE_ERROR_KEY]
        assert "start must not be after end" in errors[BASE_ERROR_KEY][0]

    @staticmethod
    def test_repr_names_the_model():
        """repr() shows the model name."""
        assert repr(PydanticValidator(PostParams)) == "PydanticValidator(PostParams)"
