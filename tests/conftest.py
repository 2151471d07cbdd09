"""Pytest configuration for Pixel Flipbook tests.

Puts the repository root on the Python path so `core`, `ui` and `utils`
import the same way they do from main.py, and runs Qt headless.
"""

import os
import sys
from pathlib import Path

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope='session', autouse=True)
def qapp():
    """One QApplication for the whole session (timers and widgets need it)."""
    app = QApplication.instance() or QApplication([])
    yield app


class SignalRecorder:
    """Collects every emission of a Qt signal."""

    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args)

    @property
    def count(self):
        return len(self.calls)

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


@pytest.fixture
def record():
    return SignalRecorder
