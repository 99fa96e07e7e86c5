# ===== Part 1: Imports & Logging ============================================
import sys
import logging

from PySide6.QtWidgets import QApplication, QMainWindow, QScrollArea

from modules import postal_receipt
from utils.app_settings import AppSettings, load_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.dev_mode else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


# ===== Part 2: Main Window ==================================================
class MainWindow(QMainWindow):
    """Single window hosting the receipt editor for this session."""

    def __init__(self, settings: AppSettings):
        super().__init__()
        self.setWindowTitle("Potwierdzenie Nadania")
        self.resize(1000, 900)

        self.panel = postal_receipt.get_receipt_editor_panel(settings=settings)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.panel)
        self.setCentralWidget(scroll)


# ===== Part 3: Application Entrypoint =======================================
def main() -> int:
    settings = load_settings()
    configure_logging(settings)
    app = QApplication(sys.argv)
    logger.info("[app] starting receipt editor (dev_mode=%s)", settings.dev_mode)
    win = MainWindow(settings)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
