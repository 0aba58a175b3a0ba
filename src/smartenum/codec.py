"""Text codec for enumeration members.

Members travel as their name. Decoding also accepts the numeric id so that
payloads written with ids keep loading. The hidden value is never emitted.

The codec is what makes an ``Enumeration`` subclass usable as a pydantic
field type:

    class Payment(BaseModel):
        card: CardType

    Payment.model_validate({"card": "visa"})   # by name, any case
    Payment.model_validate({"card": 2})        # by id
    Payment(card=CardType.VISA).model_dump()   # {"card": "Visa"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic_core import core_schema as cs

from smartenum.exceptions import DecodeError, NotFoundError, TypeMismatchError
from smartenum.logging import get_logger
from smartenum.registry import registry

if TYPE_CHECKING:
    from pydantic.json_schema import JsonSchemaMode, JsonSchemaValue
    from pydantic_core import CoreSchema

    from smartenum.enumeration import Enumeration

T = TypeVar("T", bound="Enumeration")

logger = get_logger(__name__)


class EnumerationCodec(Generic[T]):
    """Converts members of one enumeration type to and from external tokens."""

    def __init__(self, enum_type: type[T]) -> None:
        self.enum_type = enum_type

    def decode(self, token: Any) -> T:
        """Convert a token into a member.

        Strings are matched against member names (ignoring case) and integers
        against ids. Members of exactly the codec's type pass through unchanged;
        members of a subclass are rejected, since discovery never reports them.

        Raises:
            DecodeError: If the token is neither a string nor an integer, or
                if no member matches it. A failed lookup is kept as ``cause``.
        """
        if type(token) is self.enum_type:
            return token

        try:
            if isinstance(token, str):
                return registry.from_name(self.enum_type, token)
            # bool is an int subclass but never an id
            if isinstance(token, int) and not isinstance(token, bool):
                return registry.from_id(self.enum_type, token)
        except NotFoundError as e:
            logger.debug("Failed to decode %r as %s", token, self.enum_type.__name__)
            raise DecodeError(self.enum_type, token, cause=e) from e

        logger.debug(
            "Unsupported token type %s for %s",
            type(token).__name__,
            self.enum_type.__name__,
        )
        raise DecodeError(self.enum_type, token)

    def encode(self, value: T) -> str:
        """Convert a member into its name.

        Raises:
            TypeMismatchError: If ``value`` is not a member of the codec's type.
        """
        if type(value) is not self.enum_type:
            raise TypeMismatchError(self.enum_type, type(value))
        return value.name

    def core_schema(self) -> CoreSchema:
        """Build the pydantic core schema that validates with ``decode`` and serializes with ``encode``."""
        return cs.no_info_plain_validator_function(
            self.decode,
            serialization=cs.plain_serializer_function_ser_schema(
                self.encode, when_used="always"
            ),
        )

    def json_schema(self, mode: JsonSchemaMode = "validation") -> JsonSchemaValue:
        """Describe the tokens this codec reads or writes.

        Serialization always produces a member name. Validation also accepts
        an integer id, so that mode advertises both forms.
        """
        members = list(registry.get_all(self.enum_type))
        names: JsonSchemaValue = {
            "type": "string",
            "enum": [item.name for item in members],
        }
        if mode == "serialization":
            return {"title": self.enum_type.__name__, **names}
        return {
            "title": self.enum_type.__name__,
            "anyOf": [names, {"type": "integer", "enum": [item.id for item in members]}],
        }


__all__ = ["EnumerationCodec"]
