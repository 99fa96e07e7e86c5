"""Data models for the postal receipt module."""

from .shipment_form import (
    Address,
    RecipientAddress,
    Notification,
    ParcelSize,
    ShipmentOptions,
    ShipmentForm,
    FieldPath,
    UnknownFieldError,
    update,
)

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
