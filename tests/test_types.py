"""Type and canonical-form tests.

Tests cover:
- ResolvedHandler shapes and accessors
- Descriptor rendering for messages
- InvocationResult success/failure factories and serialization
"""

from __future__ import annotations

import pytest

from handler_dispatch import ErrorType, HandlerKind, InvocationResult, ResolvedHandler
from handler_dispatch.resolved_handler import describe_descriptor, describe_part
from tests.handlers.examples import example_handlers as examples

# =============================================================================
# ResolvedHandler
# =============================================================================


class TestResolvedHandler:
    """Tests for ResolvedHandler."""

    def test_function_form(self):
        handler = ResolvedHandler.for_function("strToLower")

        assert handler.kind is HandlerKind.FUNCTION
        assert handler.is_function() is True
        assert handler.is_method() is False
        assert handler.function == "strToLower"
        assert len(handler) == 1

    def test_method_form(self):
        handler = ResolvedHandler.for_method("Billing", "charge")

        assert handler.kind is HandlerKind.METHOD
        assert handler.type_ref == "Billing"
        assert handler.method_name == "charge"
        assert handler.parts == ("Billing", "charge")

    def test_wrong_shape_accessors(self):
        function = ResolvedHandler.for_function("f")
        method = ResolvedHandler.for_method("T", "m")

        with pytest.raises(AttributeError):
            function.method_name
        with pytest.raises(AttributeError):
            method.function

    def test_part_count_enforced(self):
        with pytest.raises(ValueError, match="one or two parts"):
            ResolvedHandler(parts=())
        with pytest.raises(ValueError, match="one or two parts"):
            ResolvedHandler(parts=("a", "b", "c"))

    def test_immutable(self):
        handler = ResolvedHandler.for_function("f")

        with pytest.raises(AttributeError):
            handler.parts = ("g",)

    def test_equality_by_value(self):
        assert ResolvedHandler.for_method("T", "m") == ResolvedHandler.for_method("T", "m")

    def test_describe(self):
        assert ResolvedHandler.for_method("T", "m").describe() == '["T", "m"]'


class TestDescribe:
    """Tests for descriptor rendering."""

    def test_string_passes_through(self):
        assert describe_part("name") == "name"

    def test_function_qualified_name(self):
        assert describe_part(examples.str_to_lower) == (
            "tests.handlers.examples.example_handlers.str_to_lower"
        )

    def test_class_qualified_name(self):
        assert describe_part(examples.ExampleClass).endswith("example_handlers.ExampleClass")

    def test_other_values_use_repr(self):
        assert describe_part(42) == "42"

    def test_descriptor_string(self):
        assert describe_descriptor("InvalidHandler") == '"InvalidHandler"'

    def test_descriptor_list(self):
        assert describe_descriptor(["missing_function"]) == '["missing_function"]'


# =============================================================================
# InvocationResult
# =============================================================================


class TestInvocationResult:
    """Tests for InvocationResult."""

    def test_success(self):
        result = InvocationResult.success({"total": 3}, metadata={"source": "test"})

        assert result.is_success is True
        assert result.value == {"total": 3}
        assert result.error_message is None
        assert result.metadata == {"source": "test"}

    def test_failure_defaults(self):
        result = InvocationResult.failure("went wrong")

        assert result.is_success is False
        assert result.error_message == "went wrong"
        assert result.error_type == "handler_error"

    def test_failure_custom_error_type(self):
        result = InvocationResult.failure("quota", error_type="rate_limited")

        assert result.error_type == "rate_limited"

    def test_serialized_with_alias(self):
        dumped = InvocationResult.success(1).model_dump(by_alias=True)

        assert dumped["success"] is True
        assert "is_success" not in dumped

    def test_built_from_alias(self):
        result = InvocationResult.model_validate({"success": False, "error_message": "x"})

        assert result.is_success is False

    def test_failure_with_enum_error_type(self):
        result = InvocationResult.failure("bad", error_type=ErrorType.VALIDATION_ERROR)

        assert result.error_type == "validation_error"
