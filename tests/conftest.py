# Shared fixtures. Qt tests run on the offscreen platform; a fallback 'qtbot'
# fixture is provided when pytest-qt is not installed (its fixture wins
# otherwise). Only the QApplication lifecycle is emulated.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from chartkit.design import reduced_motion  # noqa: E402

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        app = QApplication.instance() or QApplication(sys.argv)  # type: ignore
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

        yield Bot()
        for w in widgets:
            w.close()
        app.processEvents()


@pytest.fixture(autouse=True)
def _normal_motion():
    """Every test starts with reduced motion off, whatever the environment says."""
    with reduced_motion.temporarily_reduced_motion(False):
        yield
