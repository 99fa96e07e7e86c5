from __future__ import annotations

from typing import List, Optional

import pytest

from modules.postal_receipt.models import FieldPath, ShipmentForm
from modules.postal_receipt.printing import (
    PRINT_SETTLE_DELAY_MS,
    ExportOutcome,
    PdfFileSurface,
    export_for_print,
)
from modules.postal_receipt.receipt import render_receipt
from modules.postal_receipt.receipt_styles import RECEIPT_STYLESHEET


class _Source:
    def __init__(self, markup: Optional[str]):
        self.markup = markup

    def receipt_markup(self) -> Optional[str]:
        return self.markup


class _FakeSurface:
    def __init__(self, blocked: bool = False):
        self.blocked = blocked
        self.calls: List[str] = []
        self.written: List[str] = []

    def open(self):
        self.calls.append("open")
        return None if self.blocked else "handle"

    def write(self, handle, text):
        self.calls.append("write")
        self.written.append(text)

    def finalize(self, handle):
        self.calls.append("finalize")

    def focus(self, handle):
        self.calls.append("focus")

    def print(self, handle):
        self.calls.append("print")

    def close(self, handle):
        self.calls.append("close")


class _RecordingScheduler:
    def __init__(self):
        self.pending = []

    def __call__(self, delay_ms, callback):
        self.pending.append((delay_ms, callback))


def test_missing_target_touches_nothing():
    surface = _FakeSurface()
    scheduler = _RecordingScheduler()
    outcome = export_for_print(_Source(None), surface, schedule=scheduler)
    assert outcome is ExportOutcome.TARGET_MISSING
    assert surface.calls == []
    assert scheduler.pending == []


def test_blocked_surface_stops_after_open():
    surface = _FakeSurface(blocked=True)
    scheduler = _RecordingScheduler()
    outcome = export_for_print(_Source("<div/>"), surface, schedule=scheduler)
    assert outcome is ExportOutcome.SURFACE_BLOCKED
    assert surface.calls == ["open"]
    assert scheduler.pending == []


def test_document_contains_stylesheet_and_receipt_text():
    form = FieldPath.TRACKING_NUMBER.apply(ShipmentForm.blank(), "RR123456789PL")
    surface = _FakeSurface()
    export_for_print(_Source(render_receipt(form)), surface, schedule=_RecordingScheduler())
    document = "".join(surface.written)
    assert RECEIPT_STYLESHEET in document
    assert "RR123456789PL" in document
    assert document.startswith("<html><head><title>Print</title><style>")
    assert document.endswith("</body></html>")


def test_print_waits_for_settling_delay():
    surface = _FakeSurface()
    scheduler = _RecordingScheduler()
    outcome = export_for_print(_Source("<div>x</div>"), surface, schedule=scheduler)
    assert outcome is ExportOutcome.SCHEDULED
    assert surface.calls[-2:] == ["finalize", "focus"]
    assert "print" not in surface.calls

    [(delay, callback)] = scheduler.pending
    assert delay == PRINT_SETTLE_DELAY_MS == 250
    callback()
    assert surface.calls[-2:] == ["print", "close"]


def test_export_does_not_change_form():
    form = FieldPath.SENDER_NAME.apply(ShipmentForm.blank(), "Jan Kowalski")
    before = form
    export_for_print(_Source(render_receipt(form)), _FakeSurface(), schedule=lambda _ms, cb: cb())
    assert form is before
    assert form.sender.name == "Jan Kowalski"


def test_pdf_surface_writes_file(app, tmp_path, immediate):
    form = FieldPath.SENDER_NAME.apply(ShipmentForm.blank(), "Jan Kowalski")
    out = tmp_path / "receipt.pdf"
    outcome = export_for_print(
        _Source(render_receipt(form)), PdfFileSurface(out), delay_ms=0, schedule=immediate
    )
    assert outcome is ExportOutcome.SCHEDULED
    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")


def test_pdf_surface_blocked_without_directory(app, tmp_path):
    surface = PdfFileSurface(tmp_path / "missing" / "receipt.pdf")
    outcome = export_for_print(_Source("<div/>"), surface, schedule=pytest.fail)
    assert outcome is ExportOutcome.SURFACE_BLOCKED


def test_disabled_print_window_is_blocked(app):
    from modules.postal_receipt.printing import QtPrintWindowSurface

    outcome = export_for_print(_Source("<div/>"), QtPrintWindowSurface(enabled=False), schedule=pytest.fail)
    assert outcome is ExportOutcome.SURFACE_BLOCKED


def test_print_window_receives_document(app):
    from modules.postal_receipt.printing import QtPrintWindowSurface

    surface = QtPrintWindowSurface()
    handle = surface.open()
    surface.write(handle, "<html><body><p>RR987</p></body></html>")
    surface.finalize(handle)
    assert handle.view.windowTitle() == "Print"
    assert handle.view.width() == 800 and handle.view.height() == 600
    assert "RR987" in handle.view.toPlainText()
    surface.close(handle)
