"""Read-only live view of the confirmation slip."""

from __future__ import annotations

from PySide6.QtWidgets import QTextBrowser, QWidget

from ..models import ShipmentForm
from ..receipt import DEFAULT_LOGO_SRC, render_receipt
from ..receipt_styles import RECEIPT_STYLESHEET

RECEIPT_OBJECT_NAME = "printable-form"


class ReceiptView(QTextBrowser):
    def __init__(self, logo_src: str = DEFAULT_LOGO_SRC, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName(RECEIPT_OBJECT_NAME)
        self.setOpenLinks(False)
        self.document().setDefaultStyleSheet(RECEIPT_STYLESHEET)
        self._logo_src = logo_src
        self._markup = ""

    def markup(self) -> str:
        """Markup as rendered from the record, before Qt normalizes it."""
        return self._markup

    def show_form(self, form: ShipmentForm) -> None:
        self._markup = render_receipt(form, logo_src=self._logo_src)
        self.setHtml(self._markup)
