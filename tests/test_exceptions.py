"""Tests for smartenum exceptions."""

import pytest

from smartenum import (
    DecodeError,
    DuplicateMemberError,
    Enumeration,
    InvalidArgumentError,
    NotFoundError,
    SmartEnumError,
    TypeMismatchError,
    member,
)


class Color(Enumeration):
    RED = member(1, "Red")


class Shape(Enumeration):
    CIRCLE = member(1, "Circle")


class TestSmartEnumError:
    """Test SmartEnumError base class."""

    def test_with_message_only(self):
        """Test creating the base error with a message."""
        error = SmartEnumError("Test error message")

        assert str(error) == "Test error message"
        assert error.message == "Test error message"
        assert error.cause is None

    def test_with_cause(self):
        """Test that the cause is reported in the string form."""
        cause = KeyError("missing")
        error = SmartEnumError("Outer", cause=cause)

        assert error.cause is cause
        assert str(error) == "Outer (caused by: 'missing')"


class TestInvalidArgumentError:
    """Test InvalidArgumentError and DuplicateMemberError."""

    def test_inheritance(self):
        """Test the inheritance chain."""
        error = InvalidArgumentError("bad")

        assert isinstance(error, SmartEnumError)
        assert isinstance(error, ValueError)

    def test_duplicate_member_error(self):
        """Test the duplicate member message and attributes."""
        error = DuplicateMemberError(Color, "id", 1)

        assert isinstance(error, InvalidArgumentError)
        assert error.enum_type is Color
        assert error.field == "id"
        assert error.value == 1
        assert str(error) == "Duplicate id 1 in enumeration Color."


class TestNotFoundError:
    """Test NotFoundError."""

    def test_message(self):
        """Test the not-found message."""
        error = NotFoundError(Color, "name", "Blue")

        assert str(error) == "No Color with name 'Blue' found."
        assert isinstance(error, LookupError)
        assert isinstance(error, SmartEnumError)


class TestDecodeError:
    """Test DecodeError."""

    def test_without_cause(self):
        """Test a shape error."""
        error = DecodeError(Color, 1.5)

        assert str(error) == "Unable to convert value 1.5 to Color."
        assert error.token == 1.5
        assert isinstance(error, ValueError)

    def test_wraps_not_found(self):
        """Test a lookup failure."""
        cause = NotFoundError(Color, "name", "Blue")
        error = DecodeError(Color, "Blue", cause=cause)

        assert error.cause is cause
        assert "caused by: No Color with name 'Blue' found." in str(error)


class TestTypeMismatchError:
    """Test TypeMismatchError."""

    def test_message(self):
        """Test the mismatch message and attributes."""
        error = TypeMismatchError(Color, Shape)

        assert error.left is Color
        assert error.right is Shape
        assert "Color" in str(error)
        assert "Shape" in str(error)
        assert isinstance(error, TypeError)

    def test_raised_by_compare(self):
        """Test that comparing members of two types raises it."""
        with pytest.raises(TypeMismatchError) as exc_info:
            Color.RED.compare(Shape.CIRCLE)

        assert exc_info.value.left is Color
        assert exc_info.value.right is Shape
