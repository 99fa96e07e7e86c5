from __future__ import annotations

"""Owner of the shipment record edited in one session."""

import logging
from typing import Any

from PySide6.QtCore import QObject, Signal

from .models import FieldPath, ShipmentForm


logger = logging.getLogger(__name__)


class FormState(QObject):
    """Holds the current :class:`ShipmentForm` and announces every change.

    Views never keep their own copy of the record; they read ``form`` and
    re-render whenever ``formChanged`` fires.
    """

    formChanged = Signal(object)  # emits the new ShipmentForm

    def __init__(self, form: ShipmentForm | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._form = form if form is not None else ShipmentForm.blank()

    @property
    def form(self) -> ShipmentForm:
        return self._form

    def value(self, path: FieldPath) -> Any:
        return path.read(self._form)

    def update(self, path: FieldPath, value: Any) -> ShipmentForm:
        logger.debug("[receipt] update(%s, %r)", path.dotted, value)
        self._form = path.apply(self._form, value)
        self.formChanged.emit(self._form)
        return self._form

    def reset(self) -> None:
        logger.debug("[receipt] reset to blank form")
        self._form = ShipmentForm.blank()
        self.formChanged.emit(self._form)


__all__ = ["FormState"]
