"""Plain ``{id, name}`` carrier for enumeration members.

Enumeration members cannot be built without arguments, which rules them out
for serializers that instantiate an empty object and fill it field by field.
Such serializers work on ``EnumerationDto`` instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from smartenum.enumeration import Enumeration


class EnumerationDto(BaseModel):
    """Mutable snapshot of a member's public identity."""

    id: int = 0
    name: str = ""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


def to_projection(value: Enumeration) -> EnumerationDto:
    """Snapshot ``value`` as an ``EnumerationDto``. The hidden value is not copied."""
    return EnumerationDto(id=value.id, name=value.name)


__all__ = ["EnumerationDto", "to_projection"]
