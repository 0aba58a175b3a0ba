"""smartenum - rich, identity-comparable enumeration value objects.

Example usage:
    from pydantic import BaseModel
    from smartenum import Enumeration, member

    class OrderStatus(Enumeration):
        PENDING = member(1, "Pending")
        SHIPPED = member(2, "Shipped", "WH-SHIP-02")

    OrderStatus.from_id(1)                      # OrderStatus.PENDING
    OrderStatus.from_name("shipped")            # OrderStatus.SHIPPED
    OrderStatus.from_hidden_value("wh-ship-02") # OrderStatus.SHIPPED
    list(OrderStatus.get_all())                 # [PENDING, SHIPPED]

    class Order(BaseModel):
        status: OrderStatus

    Order(status=OrderStatus.SHIPPED).model_dump_json()  # '{"status":"Shipped"}'
"""

from smartenum.codec import EnumerationCodec
from smartenum.config import Settings, get_settings
from smartenum.enumeration import Enumeration, member
from smartenum.exceptions import (
    DecodeError,
    DuplicateMemberError,
    InvalidArgumentError,
    NotFoundError,
    SmartEnumError,
    TypeMismatchError,
)
from smartenum.logging import get_logger, setup_logging
from smartenum.projection import EnumerationDto, to_projection
from smartenum.registry import (
    InstanceRegistry,
    from_hidden_value,
    from_id,
    from_name,
    get_all,
    registry,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Enumeration",
    "member",
    # Discovery and lookup
    "InstanceRegistry",
    "registry",
    "get_all",
    "from_id",
    "from_name",
    "from_hidden_value",
    # Serialization
    "EnumerationCodec",
    "EnumerationDto",
    "to_projection",
    # Exceptions
    "SmartEnumError",
    "InvalidArgumentError",
    "DuplicateMemberError",
    "NotFoundError",
    "DecodeError",
    "TypeMismatchError",
    # Configuration and logging
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
]
