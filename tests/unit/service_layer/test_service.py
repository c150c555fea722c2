"""Unit tests for interactor.service_layer.service."""

import dataclasses
import re

import pytest

from interactor.domain.errors import InvariantViolation, NoOutcomeProduced
from interactor.domain.outcome import Success, failure, success
from interactor.domain.parameters import ParameterBag
from interactor.service_layer.dispatcher import HandlerSet
from interactor.service_layer.service import (
    Invocation,
    InvocationState,
    Service,
    ServiceBuilder,
)
from tests.fixtures import services

# pylint: disable=magic-value-comparison


class TestScenarios:
    """End-to-end behavior of the sample blog services."""

    @staticmethod
    def test_no_validator_single_step_returns_record():
        """publish_post returns Success(record) for a valid bag."""
        outcome = services.publish_post.call({"title": "Hi", "body": "There"})
        assert outcome == Success({"title": "Hi", "body": "There"})

    @staticmethod
    def test_validation_failure_is_untagged_and_skips_steps(make_step, step_log):
        """An empty title fails validation and no step runs."""
        service = Service(
            "create_post",
            (make_step("save", success("saved")),),
            validator=services.validate_post,
        )
        outcome = service.call({"title": ""})
        assert outcome == failure({"title": ["is required"]})
        assert outcome.tag is None
        assert not step_log

    @staticmethod
    def test_tagged_failure_dispatches_to_tag_handler():
        """Only the tagged handler fires for an inappropriate title."""
        calls = []
        handlers = HandlerSet(failure=lambda error: calls.append(("generic", error)))
        handlers.on_failure(
            lambda error: calls.append(("tagged", error)),
            tag=services.INAPPROPRIATE_TITLE,
        )
        result = services.create_post.call({"title": "buy spam now"}, handlers)
        assert result is None
        assert calls == [("tagged", "bad title")]

    @staticmethod
    def test_valid_post_passes_every_step():
        """A clean title reaches the last step."""
        outcome = services.create_post.call({"title": "Hello", "body": "World"})
        assert outcome.unwrap_success() == {"title": "Hello", "body": "World"}


class TestCallModes:
    """Direct-result mode versus dispatch mode."""

    @staticmethod
    def test_call_without_handlers_returns_outcome(make_step):
        """call(params) returns the raw outcome."""
        service = Service("svc", (make_step("a", success(1)),))
        assert service.call({}) == success(1)

    @staticmethod
    def test_call_with_handlers_dispatches(make_step):
        """call(params, handlers) dispatches and returns None."""
        seen = []
        service = Service("svc", (make_step("a", success(1)),))
        assert service.call({}, HandlerSet(success=seen.append)) is None
        assert seen == [1]

    @staticmethod
    def test_service_is_callable(make_step):
        """Calling the service directly is the same as call()."""
        service = Service("svc", (make_step("a", success(1)),))
        assert service({"x": 1}) == success(1)

    @staticmethod
    def test_execute_accepts_none_as_empty_bag():
        """execute(None) hands an empty bag to the steps."""
        seen = []

        def step(params):
            seen.append(params)
            return success(None)

        Service("svc", (step,)).execute(None)
        assert seen == [ParameterBag()]


class TestConstruction:
    """Service descriptor and builder rules."""

    @staticmethod
    def test_service_without_steps_raises():
        """A service must have at least one step."""
        with pytest.raises(NoOutcomeProduced, match=re.escape("empty produced no outcome")):
            Service("empty", ())

    @staticmethod
    def test_service_is_frozen(make_step):
        """Service descriptors are immutable."""
        service = Service("svc", [make_step("a", success(1))])
        assert isinstance(service.steps, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            service.name = "other"  # type: ignore[misc]

    @staticmethod
    def test_builder_keeps_step_order(make_step, step_log):
        """Steps run in the order they were added."""
        service = (
            ServiceBuilder("svc")
            .step(make_step("a", success(1)))
            .step(make_step("b", success(2)), make_step("c", success(3)))
            .build()
        )
        assert service.call({}) == success(3)
        assert step_log == ["a", "b", "c"]

    @staticmethod
    def test_builder_without_steps_raises():
        """Building an empty service raises NoOutcomeProduced."""
        with pytest.raises(NoOutcomeProduced):
            ServiceBuilder("empty").build()

    @staticmethod
    def test_builder_rejects_second_validator(make_validator):
        """Only one validator may be set."""
        builder = ServiceBuilder("svc").validate_with(make_validator())
        with pytest.raises(InvariantViolation, match="already has a validator"):
            builder.validate_with(make_validator())

    @staticmethod
    def test_builder_sets_validator(make_validator, make_step, step_log):
        """The validator set on the builder guards the steps."""
        validator = make_validator({"body": ["is too short"]})
        service = (
            ServiceBuilder("svc")
            .validate_with(validator)
            .step(make_step("a", success(1)))
            .build()
        )
        assert service.validator is validator
        assert service.call({"body": ""}) == failure({"body": ["is too short"]})
        assert not step_log


class TestInvocation:
    """Per-call state machine."""

    @staticmethod
    def test_success_path(make_step):
        """A successful run ends in ALL_STEPS_SUCCEEDED."""
        service = Service("svc", (make_step("a", success(1)),))
        invocation = Invocation(service, ParameterBag())
        outcome = invocation.run()
        assert invocation.outcome is outcome
        assert invocation.state is InvocationState.ALL_STEPS_SUCCEEDED
        assert invocation.history == [
            InvocationState.START,
            InvocationState.VALIDATING,
            InvocationState.VALIDATED,
            InvocationState.EXECUTING,
            InvocationState.ALL_STEPS_SUCCEEDED,
        ]
        assert invocation.state.is_terminal

    @staticmethod
    def test_step_failure_path(make_step):
        """A failing step ends in STEP_FAILED."""
        service = Service("svc", (make_step("a", failure("e")),))
        invocation = Invocation(service, ParameterBag())
        invocation.run()
        assert invocation.state is InvocationState.STEP_FAILED

    @staticmethod
    def test_validation_failure_path(make_step, make_validator):
        """A rejected bag ends in VALIDATION_FAILED without executing."""
        service = Service(
            "svc",
            (make_step("a", success(1)),),
            validator=make_validator({"title": ["is required"]}),
        )
        invocation = Invocation(service, ParameterBag())
        invocation.run()
        assert invocation.state is InvocationState.VALIDATION_FAILED
        assert InvocationState.EXECUTING not in invocation.history

    @staticmethod
    def test_invocation_runs_once(make_step):
        """A finished invocation cannot be run again."""
        invocation = Invocation(
            Service("svc", (make_step("a", success(1)),)), ParameterBag()
        )
        invocation.run()
        with pytest.raises(InvariantViolation, match="cannot move from"):
            invocation.run()

    @staticmethod
    def test_non_terminal_states():
        """Only the three end states are terminal."""
        assert not InvocationState.START.is_terminal
        assert not InvocationState.EXECUTING.is_terminal
        assert InvocationState.VALIDATION_FAILED.is_terminal
