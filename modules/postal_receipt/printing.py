"""Print export of the rendered receipt.

:func:`export_for_print` copies the receipt markup and its stylesheet into a
fresh print surface, lets it settle for a moment and then prints and closes
it.  Surfaces implement the small :class:`PrintSurface` protocol: a Qt print
window for interactive use and a PDF file writer for everything else.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, List, Optional, Protocol

from PySide6.QtCore import QMarginsF, Qt, QTimer
from PySide6.QtGui import QGuiApplication, QPageLayout, QPageSize, QPdfWriter, QTextDocument
from PySide6.QtPrintSupport import QPrintDialog, QPrinter
from PySide6.QtWidgets import QApplication, QDialog, QTextBrowser

from .receipt_styles import RECEIPT_STYLESHEET


logger = logging.getLogger(__name__)

PRINT_SETTLE_DELAY_MS = 250


class ExportOutcome(str, Enum):
    SCHEDULED = "scheduled"
    TARGET_MISSING = "target_missing"
    SURFACE_BLOCKED = "surface_blocked"


class ReceiptMarkupSource(Protocol):
    def receipt_markup(self) -> Optional[str]:
        ...


class PrintSurface(Protocol):
    """Host capability able to receive a document and print it."""

    def open(self) -> Optional[Any]:
        ...

    def write(self, handle: Any, text: str) -> None:
        ...

    def finalize(self, handle: Any) -> None:
        ...

    def focus(self, handle: Any) -> None:
        ...

    def print(self, handle: Any) -> None:
        ...

    def close(self, handle: Any) -> None:
        ...


Scheduler = Callable[[int, Callable[[], None]], None]


def export_for_print(
    source: ReceiptMarkupSource,
    surface: PrintSurface,
    stylesheet: str = RECEIPT_STYLESHEET,
    delay_ms: int = PRINT_SETTLE_DELAY_MS,
    schedule: Scheduler | None = None,
) -> ExportOutcome:
    """Send the receipt held by ``source`` to ``surface``.

    Nothing touches the surface when there is no receipt to print, and
    nothing is written when the surface refuses to open.  Neither case is an
    error; the returned :class:`ExportOutcome` tells the caller what
    happened.  The form state is only read, never changed.
    """

    markup = source.receipt_markup()
    if markup is None:
        logger.warning("[print] no rendered receipt found; nothing to print")
        return ExportOutcome.TARGET_MISSING

    handle = surface.open()
    if handle is None:
        logger.warning("[print] print surface could not be opened")
        return ExportOutcome.SURFACE_BLOCKED

    surface.write(handle, "<html><head><title>Print</title>")
    surface.write(handle, "<style>" + stylesheet + "</style>")
    surface.write(handle, "</head><body>")
    surface.write(handle, markup)
    surface.write(handle, "</body></html>")

    surface.finalize(handle)
    surface.focus(handle)

    def _print_and_close() -> None:
        surface.print(handle)
        surface.close(handle)

    if schedule is None:
        schedule = QTimer.singleShot
    schedule(delay_ms, _print_and_close)
    logger.info("[print] print scheduled in %d ms", delay_ms)
    return ExportOutcome.SCHEDULED


# ---------------------------------------------------------------- surfaces

class _PrintWindow:
    def __init__(self, view: QTextBrowser) -> None:
        self.view = view
        self.chunks: List[str] = []
        self.closed = False
        view.destroyed.connect(self._on_destroyed)

    def _on_destroyed(self, *_args) -> None:
        self.closed = True

    @property
    def html(self) -> str:
        return "".join(self.chunks)


class QtPrintWindowSurface:
    """Top-level preview window printed through the native print dialog."""

    geometry = (200, 200, 800, 600)

    def __init__(self, enabled: bool = True, parent=None) -> None:
        self.enabled = enabled
        self.parent = parent

    def open(self) -> Optional[_PrintWindow]:
        if not self.enabled or QApplication.instance() is None:
            return None
        view = QTextBrowser(self.parent)
        view.setWindowFlag(Qt.Window, True)
        view.setAttribute(Qt.WA_DeleteOnClose, True)
        view.setWindowTitle("Print")
        view.setGeometry(*self.geometry)
        return _PrintWindow(view)

    def write(self, handle: _PrintWindow, text: str) -> None:
        handle.chunks.append(text)

    def finalize(self, handle: _PrintWindow) -> None:
        handle.view.setHtml(handle.html)

    def focus(self, handle: _PrintWindow) -> None:
        handle.view.show()
        handle.view.raise_()
        handle.view.activateWindow()

    def print(self, handle: _PrintWindow) -> None:
        if handle.closed:
            logger.info("[print] print window closed before printing")
            return
        printer = QPrinter()
        dialog = QPrintDialog(printer, handle.view)
        if dialog.exec() == QDialog.Accepted:
            handle.view.document().print_(printer)

    def close(self, handle: _PrintWindow) -> None:
        if not handle.closed:
            handle.view.close()


class _PdfTarget:
    def __init__(self, path: Path) -> None:
        self.path = path
        self.chunks: List[str] = []
        self.document: QTextDocument | None = None


class PdfFileSurface:
    """Writes the receipt to a PDF file instead of a printer."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def open(self) -> Optional[_PdfTarget]:
        if QGuiApplication.instance() is None:
            return None
        if not self.path.parent.is_dir():
            logger.warning("[print] PDF directory %s does not exist", self.path.parent)
            return None
        return _PdfTarget(self.path)

    def write(self, handle: _PdfTarget, text: str) -> None:
        handle.chunks.append(text)

    def finalize(self, handle: _PdfTarget) -> None:
        doc = QTextDocument()
        doc.setHtml("".join(handle.chunks))
        handle.document = doc

    def focus(self, handle: _PdfTarget) -> None:
        pass

    def print(self, handle: _PdfTarget) -> None:
        writer = QPdfWriter(str(handle.path))
        writer.setPageSize(QPageSize(QPageSize.PageSizeId.A4))
        writer.setPageMargins(QMarginsF(12, 12, 12, 12), QPageLayout.Unit.Millimeter)
        handle.document.print_(writer)
        logger.info("[print] receipt written to %s", handle.path)

    def close(self, handle: _PdfTarget) -> None:
        handle.document = None


__all__ = [
    "ExportOutcome",
    "PrintSurface",
    "ReceiptMarkupSource",
    "export_for_print",
    "QtPrintWindowSurface",
    "PdfFileSurface",
    "PRINT_SETTLE_DELAY_MS",
]
