from __future__ import annotations

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from galaxygenerator.model.spin_profiles import SpinProfileKey
from galaxygenerator.model.state import GalaxyState
from galaxygenerator.view.widgets.control_panel import GalaxyControlPanel


@pytest.fixture(scope="session")
def app_instance():
    """Create a QApplication instance for the test session."""
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication(sys.argv)
    return app


@pytest.fixture
def panel(app_instance):
    state = GalaxyState()
    widget = GalaxyControlPanel(state)
    commits: list[None] = []
    selections: list[str] = []
    widget.parameters_committed.connect(lambda: commits.append(None))
    widget.profile_selected.connect(selections.append)
    widget.commits = commits
    widget.selections = selections
    yield widget
    widget.deleteLater()


def test_panel_shows_state(panel):
    assert panel._spins["count"].value() == 150_000
    assert panel._spins["branches"].value() == 10
    assert panel._color_buttons["inside_color"].color() == "#ff6030"
    assert panel._variant_buttons[SpinProfileKey.SINE].isChecked()


def test_stepping_is_committed_once(panel):
    spin = panel._spins["branches"]
    for _ in range(5):
        spin.stepUp()

    # Nothing reaches the state until the interaction ends
    assert panel.state.parameters.branches == 10
    assert panel.commits == []

    panel.commit_pending()

    assert panel.state.parameters.branches == 15
    assert len(panel.commits) == 1


def test_commit_without_edits_does_nothing(panel):
    panel.commit_pending()
    assert panel.commits == []


def test_variant_selection_is_immediate(panel):
    panel._variant_buttons[SpinProfileKey.COSINE].click()

    assert panel.selections == ["cosine"]
    assert panel.state.profile_key is SpinProfileKey.COSINE
    assert panel.commits == []


def test_reset_restores_defaults(panel):
    panel.state.set_parameter("radius", 12.0)
    panel.on_reset_clicked()

    assert panel._spins["radius"].value() == pytest.approx(5.0)
    assert len(panel.commits) == 1
