from .receipt_editor_panel import ReceiptEditorPanel
from .receipt_view import ReceiptView

__all__ = ["ReceiptEditorPanel", "ReceiptView"]
