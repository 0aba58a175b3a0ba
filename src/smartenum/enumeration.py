"""Base class for smart enumerations.

A smart enumeration is a closed set of singleton value objects. Each member
carries an integer ``id``, a display ``name`` and an optional hidden value
that is never written out by any serialization path.

Example:
    from smartenum import Enumeration, member

    class CardType(Enumeration):
        AMEX = member(1, "Amex")
        VISA = member(2, "Visa", "internal-visa-code")

    CardType.from_name("visa") is CardType.VISA
    CardType.AMEX < CardType.VISA
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, TypeVar

from smartenum.codec import EnumerationCodec
from smartenum.exceptions import InvalidArgumentError, TypeMismatchError
from smartenum.projection import EnumerationDto, to_projection
from smartenum.registry import registry

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

T = TypeVar("T", bound="Enumeration")


class _MemberDeclaration:
    """Placeholder for a member, replaced by a real instance at class creation."""

    def __init__(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        self.args = args
        self.kwargs = kwargs

    def build(self, cls: type[T]) -> T:
        return cls(*self.args, **self.kwargs)

    def __repr__(self) -> str:
        return f"member(*{self.args!r}, **{self.kwargs!r})"


def member(*args: Any, **kwargs: Any) -> Any:
    """Declare a member inside an Enumeration class body.

    The arguments are passed to the class constructor once the class exists,
    so subclasses with extra constructor parameters declare them here too.
    """
    return _MemberDeclaration(args, kwargs)


def _restore_member(cls: type[T], id: int) -> T:
    """Resolve a pickled member back to the live singleton."""
    return registry.from_id(cls, id)


class Enumeration:
    """Base class for closed sets of identity-comparable value objects.

    Members are equal when they belong to the same concrete type and share an
    id; the name and hidden value do not take part in equality, so a member
    can be renamed without breaking stored references. Ordering is by id.

    Instances are frozen once ``Enumeration.__init__`` returns. Subclasses
    that carry extra data assign it before calling ``super().__init__``.
    """

    # Base fields live in slots so they stay out of the instance __dict__
    __slots__ = ("_id", "_name", "_hidden_value", "_frozen")

    def __init__(self, id: int, name: str, hidden_value: str | None = None) -> None:
        if type(self) is Enumeration:
            raise TypeError("Enumeration is abstract; declare members on a subclass")
        if not isinstance(id, int) or isinstance(id, bool):
            raise InvalidArgumentError(f"id must be an int, got {id!r}")
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(f"name must be a non-empty str, got {name!r}")
        if hidden_value is not None and not isinstance(hidden_value, str):
            raise InvalidArgumentError(
                f"hidden_value must be a str or None, got {type(hidden_value).__name__}"
            )

        object.__setattr__(self, "_id", id)
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_hidden_value", hidden_value)
        object.__setattr__(self, "_frozen", True)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared = [
            (attr_name, value)
            for attr_name, value in vars(cls).items()
            if isinstance(value, _MemberDeclaration)
        ]
        # An alias (B = A in the class body) shares A's declaration and instance
        built: dict[int, Enumeration] = {}
        for attr_name, declaration in declared:
            instance = built.get(id(declaration))
            if instance is None:
                instance = built[id(declaration)] = declaration.build(cls)
            setattr(cls, attr_name, instance)

        # Surface duplicate ids/names at class definition time
        registry.invalidate(cls)
        registry.scan(cls)

    # =========================================================================
    # Identity
    # =========================================================================

    @property
    def id(self) -> int:
        """Numeric identifier, unique within the concrete type."""
        return self._id

    @property
    def name(self) -> str:
        """Display name, unique (ignoring case) within the concrete type."""
        return self._name

    @property
    def hidden_value(self) -> str | None:
        """Internal value. Never serialized."""
        return self._hidden_value

    def to_display_string(self) -> str:
        return self._name

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r}, name={self._name!r})"

    def __setattr__(self, key: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} members are immutable")
        object.__setattr__(self, key, value)

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} members are immutable")

    # Members are singletons; copying or unpickling yields the same object.

    def __copy__(self: T) -> T:
        return self

    def __deepcopy__(self: T, memo: dict[int, Any]) -> T:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore_member, (self.__class__, self._id))

    # =========================================================================
    # Equality and ordering
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def compare(self, other: Enumeration) -> int:
        """Return -1, 0 or 1 as this member's id is below, equal to or above ``other``'s.

        Raises:
            TypeMismatchError: If ``other`` is not a member of the same type.
        """
        if type(self) is not type(other):
            raise TypeMismatchError(type(self), type(other))
        return (self._id > other._id) - (self._id < other._id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.compare(other) >= 0

    # =========================================================================
    # Lookup
    # =========================================================================

    @classmethod
    def get_all(cls: type[T]) -> Iterator[T]:
        """Iterate over the members declared on this type."""
        return registry.get_all(cls)

    @classmethod
    def from_id(cls: type[T], id: int) -> T:
        return registry.from_id(cls, id)

    @classmethod
    def from_name(cls: type[T], name: str) -> T:
        return registry.from_name(cls, name)

    @classmethod
    def from_hidden_value(cls: type[T], value: str) -> T:
        return registry.from_hidden_value(cls, value)

    @classmethod
    def try_from_id(cls: type[T], id: int) -> T | None:
        return registry.try_from_id(cls, id)

    @classmethod
    def try_from_name(cls: type[T], name: str) -> T | None:
        return registry.try_from_name(cls, name)

    @classmethod
    def try_from_hidden_value(cls: type[T], value: str) -> T | None:
        return registry.try_from_hidden_value(cls, value)

    @classmethod
    def is_defined(cls, key: int | str) -> bool:
        """Check whether an id or name belongs to a member of this type."""
        return registry.is_defined(cls, key)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dto(self) -> EnumerationDto:
        """Return an ``{id, name}`` snapshot for serializers that need a plain model."""
        return to_projection(self)

    @classmethod
    def codec(cls: type[T]) -> EnumerationCodec[T]:
        return EnumerationCodec(cls)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return EnumerationCodec(cls).core_schema()

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return EnumerationCodec(cls).json_schema(handler.mode)


__all__ = ["Enumeration", "member"]
