"""Postal receipt module exposing the editor panel factory."""


def get_receipt_editor_panel(*_args, **_kwargs):
    from modules.postal_receipt.panels.receipt_editor_panel import ReceiptEditorPanel
    return ReceiptEditorPanel(**_kwargs)
