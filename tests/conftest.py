from __future__ import annotations

import os

# Qt widgets require a platform plugin.  Offscreen avoids libGL dependencies
# inside the test container.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))


@pytest.fixture(scope="session")
def app():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def run_now(_delay_ms, callback):
    callback()


@pytest.fixture
def immediate():
    """Scheduler that runs the deferred print callback right away."""
    return run_now
