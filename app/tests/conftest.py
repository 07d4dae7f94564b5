"""
Shared test fixtures for the TPS tester test suite.

All fixtures build pure-Python model objects (no Qt dependencies).
"""

import os
import sys
from pathlib import Path

# Ensure app/ is on sys.path so bare imports (models, controllers, GUI, cli)
# work when running individual test files (e.g., python -m pytest app/tests/unit/test_foo.py).
_app_dir = str(Path(__file__).resolve().parent.parent)
if _app_dir not in sys.path:
    sys.path.insert(0, _app_dir)

# Qt widget tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from controllers.number_controller import NumberController
from controllers.undo_manager import UndoManager
from models.number import NumberModel


@pytest.fixture
def number():
    """A fresh number starting at zero."""
    return NumberModel()


@pytest.fixture
def manager():
    """An empty, unbounded history."""
    return UndoManager()


@pytest.fixture
def controller(number, manager):
    """A controller wired to the ``number`` and ``manager`` fixtures."""
    return NumberController(number, manager)


@pytest.fixture
def recorder(controller):
    """Collect (event, data) pairs emitted by the controller."""
    events = []
    controller.add_observer(lambda event, data: events.append((event, data)))
    return events
