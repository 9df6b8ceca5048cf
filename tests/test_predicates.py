"""Tests for classification predicates and cause traversal."""

from __future__ import annotations

import pytest

from baseerror import (
    ConfigurationError,
    Error,
    StructuredError,
    clone,
    is_base_error,
    is_business_error,
    is_system_error,
    iter_causes,
    new,
    new_code_wrap,
    new_system,
    new_wrap,
)


class LookalikeError(Exception):
    """Has the same public fields but not the capability marker."""

    def __init__(self) -> None:
        super().__init__("lookalike")
        self.code = "C"
        self.msg = "lookalike"
        self.system = True


class TestClassification:
    @pytest.mark.parametrize(
        "err",
        [
            new("x"),
            new_system("x"),
            new_wrap(ValueError("x")),
            clone(new("x")),
            ConfigurationError("c", "m"),
        ],
    )
    def test_constructor_outputs_are_structured(self, err):
        assert is_base_error(err)
        assert isinstance(err, StructuredError)

    @pytest.mark.parametrize("err", [ValueError("x"), RuntimeError(), LookalikeError(), None, "text"])
    def test_other_values_are_not_structured(self, err):
        assert not is_base_error(err)
        assert not is_system_error(err)
        assert not is_business_error(err)

    def test_system_fault(self):
        err = new_system("down")
        assert is_system_error(err)
        assert not is_business_error(err)

    def test_business_fault(self):
        err = new("invalid input")
        assert is_business_error(err)
        assert not is_system_error(err)

    def test_subclass_is_structured(self):
        class PaymentError(Error):
            pass

        assert is_business_error(PaymentError("declined"))


class TestIterCauses:
    def test_walks_structured_and_plain_causes(self):
        # Arrange
        root = KeyError("k")
        middle = ValueError("v")
        middle.__cause__ = root
        top = new_code_wrap("T", middle)

        # Act
        causes = list(iter_causes(top))

        # Assert
        assert causes == [middle, root]

    def test_no_cause(self):
        assert list(iter_causes(new("x"))) == []

    def test_none(self):
        assert list(iter_causes(None)) == []
