"""Dataclasses describing one postal shipment and its receipt.

The record is immutable.  Edits go through :func:`update`, which returns a
new :class:`ShipmentForm` that shares every untouched section with the old
one.  A small closed set of :class:`FieldPath` members names every editable
value so that widgets never address the record with free-form strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass, replace
from enum import Enum
from typing import Any, Optional

__all__ = [
    "Address",
    "RecipientAddress",
    "Notification",
    "ParcelSize",
    "ShipmentOptions",
    "ShipmentForm",
    "FieldPath",
    "UnknownFieldError",
    "update",
]


class UnknownFieldError(KeyError):
    """Raised when a section or field does not exist on the shipment record."""


class ParcelSize(str, Enum):
    S = "S"
    M = "M"
    L = "L"


@dataclass(frozen=True)
class Address:
    name: str = ""
    address_line1: str = ""
    address_line2: str = ""
    postal_code: str = ""
    city: str = ""


@dataclass(frozen=True)
class RecipientAddress(Address):
    country: str = ""


@dataclass(frozen=True)
class Notification:
    enabled: bool = False
    # Only shown on the receipt while ``enabled`` is true.
    contact: str = ""


@dataclass(frozen=True)
class ShipmentOptions:
    delivery_confirmation: bool = False
    priority: bool = False
    size: ParcelSize = ParcelSize.M

    def __post_init__(self) -> None:
        # Raises ValueError for anything outside S/M/L
        object.__setattr__(self, "size", ParcelSize(self.size))


@dataclass(frozen=True)
class ShipmentForm:
    tracking_number: str = ""
    sender: Address = field(default_factory=Address)
    recipient: RecipientAddress = field(default_factory=RecipientAddress)
    sender_notification: Notification = field(default_factory=Notification)
    recipient_notification: Notification = field(default_factory=Notification)
    options: ShipmentOptions = field(default_factory=ShipmentOptions)

    @classmethod
    def blank(cls) -> "ShipmentForm":
        """Return the session-start record: empty strings, false flags, size M."""
        return cls()


_SECTIONS = frozenset(f.name for f in fields(ShipmentForm))


def update(form: ShipmentForm, section: str, field_name: Optional[str], value: Any) -> ShipmentForm:
    """Return ``form`` with ``section.field_name`` replaced by ``value``.

    Structured sections are copied with the single field replaced; every
    other section of the result is the very same object as in ``form``.
    A section that is not a record (the tracking number) is replaced as a
    whole and ``field_name`` is ignored.  Values are not validated.
    """

    if section not in _SECTIONS:
        raise UnknownFieldError(section)
    current = getattr(form, section)
    if is_dataclass(current):
        if field_name not in {f.name for f in fields(current)}:
            raise UnknownFieldError(f"{section}.{field_name}")
        return replace(form, **{section: replace(current, **{field_name: value})})
    return replace(form, **{section: value})


class FieldPath(Enum):
    """Every editable ``(section, field)`` location of a :class:`ShipmentForm`."""

    TRACKING_NUMBER = ("tracking_number", None)

    SENDER_NAME = ("sender", "name")
    SENDER_ADDRESS_LINE1 = ("sender", "address_line1")
    SENDER_ADDRESS_LINE2 = ("sender", "address_line2")
    SENDER_POSTAL_CODE = ("sender", "postal_code")
    SENDER_CITY = ("sender", "city")

    RECIPIENT_NAME = ("recipient", "name")
    RECIPIENT_ADDRESS_LINE1 = ("recipient", "address_line1")
    RECIPIENT_ADDRESS_LINE2 = ("recipient", "address_line2")
    RECIPIENT_POSTAL_CODE = ("recipient", "postal_code")
    RECIPIENT_CITY = ("recipient", "city")
    RECIPIENT_COUNTRY = ("recipient", "country")

    SENDER_NOTIFICATION_ENABLED = ("sender_notification", "enabled")
    SENDER_NOTIFICATION_CONTACT = ("sender_notification", "contact")
    RECIPIENT_NOTIFICATION_ENABLED = ("recipient_notification", "enabled")
    RECIPIENT_NOTIFICATION_CONTACT = ("recipient_notification", "contact")

    OPTIONS_DELIVERY_CONFIRMATION = ("options", "delivery_confirmation")
    OPTIONS_PRIORITY = ("options", "priority")
    OPTIONS_SIZE = ("options", "size")

    @property
    def section(self) -> str:
        return self.value[0]

    @property
    def field(self) -> Optional[str]:
        return self.value[1]

    @property
    def dotted(self) -> str:
        return self.section if self.field is None else f"{self.section}.{self.field}"

    def read(self, form: ShipmentForm) -> Any:
        """Return the value stored at this path in ``form``."""
        current = getattr(form, self.section)
        if self.field is None:
            return current
        return getattr(current, self.field)

    def apply(self, form: ShipmentForm, value: Any) -> ShipmentForm:
        return update(form, self.section, self.field, value)

    @classmethod
    def parse(cls, dotted: str) -> "FieldPath":
        """Resolve ``"sender.name"`` style strings to a member."""
        for member in cls:
            if member.dotted == dotted:
                return member
        raise UnknownFieldError(dotted)
