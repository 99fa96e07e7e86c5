"""Two-way glue between input widgets and :class:`FormState`.

Each binding ties one widget to one :class:`FieldPath`.  User edits are
forwarded to :meth:`FormState.update`; every ``formChanged`` refreshes the
widgets from the record with their signals blocked, so a refresh never
feeds back into another update.
"""

from __future__ import annotations

from typing import Callable, List

from PySide6.QtWidgets import QCheckBox, QComboBox, QLineEdit, QWidget

from .models import FieldPath, ParcelSize, ShipmentForm
from .state import FormState


class FieldBinder:
    def __init__(self, state: FormState) -> None:
        self.state = state
        self._refreshers: List[Callable[[ShipmentForm], None]] = []
        state.formChanged.connect(self.refresh)

    def refresh(self, form: ShipmentForm | None = None) -> None:
        form = form if form is not None else self.state.form
        for refresh in self._refreshers:
            refresh(form)

    # ------------------------------------------------------------------ inputs
    def bind_text(self, widget: QLineEdit, path: FieldPath) -> QLineEdit:
        def _refresh(form: ShipmentForm) -> None:
            text = path.read(form) or ""
            if widget.text() != text:
                widget.blockSignals(True)
                widget.setText(text)
                widget.blockSignals(False)

        widget.textEdited.connect(lambda text: self.state.update(path, text))
        self._add(_refresh)
        return widget

    def bind_check(self, widget: QCheckBox, path: FieldPath) -> QCheckBox:
        def _refresh(form: ShipmentForm) -> None:
            checked = bool(path.read(form))
            if widget.isChecked() != checked:
                widget.blockSignals(True)
                widget.setChecked(checked)
                widget.blockSignals(False)

        widget.toggled.connect(lambda checked: self.state.update(path, bool(checked)))
        self._add(_refresh)
        return widget

    def bind_choice(self, widget: QComboBox, path: FieldPath = FieldPath.OPTIONS_SIZE) -> QComboBox:
        if widget.count() == 0:
            for size in ParcelSize:
                widget.addItem(size.value, size.value)

        def _refresh(form: ShipmentForm) -> None:
            index = widget.findData(ParcelSize(path.read(form)).value)
            if index >= 0 and widget.currentIndex() != index:
                widget.blockSignals(True)
                widget.setCurrentIndex(index)
                widget.blockSignals(False)

        widget.currentIndexChanged.connect(
            lambda index: self.state.update(path, widget.itemData(index))
        )
        self._add(_refresh)
        return widget

    # -------------------------------------------------------------- visibility
    def bind_visible_when(self, widget: QWidget, path: FieldPath) -> QWidget:
        """Show ``widget`` only while the boolean at ``path`` is true.

        Hiding leaves the widget's own bound value untouched in the record.
        """

        self._add(lambda form: widget.setVisible(bool(path.read(form))))
        return widget

    def _add(self, refresh: Callable[[ShipmentForm], None]) -> None:
        self._refreshers.append(refresh)
        refresh(self.state.form)


__all__ = ["FieldBinder"]
