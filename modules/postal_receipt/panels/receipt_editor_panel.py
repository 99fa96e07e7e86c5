"""Editor panel for the postal confirmation slip.

The panel owns one :class:`FormState`.  Inputs are wired to it through a
:class:`FieldBinder`; the live receipt view below the inputs re-renders on
every change and is also what gets printed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from utils.app_settings import AppSettings, load_settings

from ..bindings import FieldBinder
from ..models import FieldPath
from ..printing import (
    ExportOutcome,
    PdfFileSurface,
    PrintSurface,
    QtPrintWindowSurface,
    Scheduler,
    export_for_print,
)
from ..state import FormState
from .receipt_view import RECEIPT_OBJECT_NAME, ReceiptView


logger = logging.getLogger(__name__)

_OUTCOME_MESSAGES = {
    ExportOutcome.SCHEDULED: "",
    ExportOutcome.TARGET_MISSING: "Nothing to print: the receipt preview is not available.",
    ExportOutcome.SURFACE_BLOCKED: "The print window could not be opened.",
}


class ReceiptEditorPanel(QWidget):
    def __init__(
        self,
        state: FormState | None = None,
        settings: AppSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings if settings is not None else load_settings()
        self.state = state if state is not None else FormState(parent=self)
        self.binder = FieldBinder(self.state)
        self.print_surface: PrintSurface = QtPrintWindowSurface(
            enabled=self.settings.print_enabled, parent=self
        )
        self.schedule: Scheduler | None = None

        layout = QVBoxLayout(self)

        title = QLabel("Generator Potwierdzenia Nadania Poczty Polskiej")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(title)

        tracking = QFormLayout()
        self.ed_tracking = self.binder.bind_text(QLineEdit(), FieldPath.TRACKING_NUMBER)
        tracking.addRow("Przesyłki poleconej nr:", self.ed_tracking)
        layout.addLayout(tracking)

        columns = QHBoxLayout()
        columns.addWidget(self._build_sender_group())
        columns.addWidget(self._build_recipient_group())
        layout.addLayout(columns)
        layout.addWidget(self._build_options_group())

        buttons = QHBoxLayout()
        self.print_btn = QPushButton("Print Form")
        self.pdf_btn = QPushButton("Save PDF…")
        buttons.addStretch()
        buttons.addWidget(self.print_btn)
        buttons.addWidget(self.pdf_btn)
        buttons.addStretch()
        layout.addLayout(buttons)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: #b00020")
        layout.addWidget(self.status_label)

        self.receipt_view = ReceiptView(logo_src=self.settings.logo_src, parent=self)
        layout.addWidget(self.receipt_view, 1)

        notice = QLabel("Data is processed locally on this computer. No data is sent to any server.")
        notice.setAlignment(Qt.AlignCenter)
        notice.setStyleSheet("color: gray; font-size: 11px;")
        layout.addWidget(notice)

        self.print_btn.clicked.connect(self.print_receipt)
        self.pdf_btn.clicked.connect(self._on_save_pdf)
        self.state.formChanged.connect(self.receipt_view.show_form)
        self.receipt_view.show_form(self.state.form)

    # ------------------------------------------------------------------ layout
    def _address_rows(self, form: QFormLayout, prefix: str) -> None:
        for label, suffix in (
            ("Name", "NAME"),
            ("Address Line 1", "ADDRESS_LINE1"),
            ("Address Line 2 (Optional)", "ADDRESS_LINE2"),
            ("Postal Code", "POSTAL_CODE"),
            ("City", "CITY"),
        ):
            path = FieldPath[f"{prefix}_{suffix}"]
            edit = self.binder.bind_text(QLineEdit(), path)
            setattr(self, f"ed_{prefix.lower()}_{suffix.lower()}", edit)
            form.addRow(label, edit)

    def _notification_rows(self, form: QFormLayout, prefix: str, caption: str) -> None:
        enabled = FieldPath[f"{prefix}_NOTIFICATION_ENABLED"]
        contact = FieldPath[f"{prefix}_NOTIFICATION_CONTACT"]
        cb = self.binder.bind_check(QCheckBox(caption), enabled)
        form.addRow(cb)

        row = QWidget()
        row_layout = QVBoxLayout(row)
        row_layout.setContentsMargins(0, 0, 0, 0)
        row_layout.addWidget(QLabel("SMS/Email"))
        edit = self.binder.bind_text(QLineEdit(), contact)
        row_layout.addWidget(edit)
        form.addRow(row)
        self.binder.bind_visible_when(row, enabled)

        key = prefix.lower()
        setattr(self, f"cb_{key}_notification", cb)
        setattr(self, f"ed_{key}_contact", edit)
        setattr(self, f"{key}_contact_row", row)

    def _build_sender_group(self) -> QGroupBox:
        box = QGroupBox("Dane nadawcy")
        form = QFormLayout(box)
        self._address_rows(form, "SENDER")
        self._notification_rows(form, "SENDER", "Potwierdzenie doręczenia")
        return box

    def _build_recipient_group(self) -> QGroupBox:
        box = QGroupBox("Dane adresata")
        form = QFormLayout(box)
        self._address_rows(form, "RECIPIENT")
        self.ed_recipient_country = self.binder.bind_text(QLineEdit(), FieldPath.RECIPIENT_COUNTRY)
        form.addRow("Kraj", self.ed_recipient_country)
        self._notification_rows(form, "RECIPIENT", "Powiadomienie adresata")
        return box

    def _build_options_group(self) -> QGroupBox:
        box = QGroupBox("Opcje przesyłki")
        row = QHBoxLayout(box)
        self.cb_delivery_confirmation = self.binder.bind_check(
            QCheckBox("Delivery confirmation"), FieldPath.OPTIONS_DELIVERY_CONFIRMATION
        )
        self.cb_priority = self.binder.bind_check(QCheckBox("Priority"), FieldPath.OPTIONS_PRIORITY)
        self.cmb_size = self.binder.bind_choice(QComboBox(), FieldPath.OPTIONS_SIZE)
        row.addWidget(self.cb_delivery_confirmation)
        row.addWidget(self.cb_priority)
        row.addStretch()
        row.addWidget(QLabel("Format"))
        row.addWidget(self.cmb_size)
        return box

    # ------------------------------------------------------------------ export
    def receipt_markup(self) -> Optional[str]:
        view = self.findChild(ReceiptView, RECEIPT_OBJECT_NAME)
        if view is None:
            return None
        return view.markup()

    def _report(self, outcome: ExportOutcome) -> ExportOutcome:
        self.status_label.setText(_OUTCOME_MESSAGES[outcome])
        return outcome

    def print_receipt(self) -> ExportOutcome:
        outcome = export_for_print(
            self,
            self.print_surface,
            delay_ms=self.settings.print_delay_ms,
            schedule=self.schedule,
        )
        return self._report(outcome)

    def save_pdf(self, path: Path | str) -> ExportOutcome:
        outcome = export_for_print(self, PdfFileSurface(path), delay_ms=0, schedule=self.schedule)
        return self._report(outcome)

    def _on_save_pdf(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Save PDF", filter="PDF Files (*.pdf)")
        if not path:
            return
        self.save_pdf(path)


__all__ = ["ReceiptEditorPanel"]
