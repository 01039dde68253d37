"""
Galaxy Control Panel
====================
Left-side panel that edits the GalaxyState.

Numeric editors only commit when an interaction ends (Enter, focus out, or a
short pause after stepping with the arrows or the wheel), so a burst of edits
regenerates the galaxy once. Picking a spin variant regenerates immediately.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Signal, Slot, QTimer
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QGridLayout, QLabel, QSpinBox, QDoubleSpinBox,
    QAbstractSpinBox, QPushButton, QButtonGroup, QColorDialog, QSizePolicy
)

from galaxygenerator.model.parameters import PARAMETER_SPECS, COLOR_LABELS, ParameterSpec
from galaxygenerator.model.spin_profiles import SpinProfileKey, list_keys, profile_label
from galaxygenerator.model.state import GalaxyState

logger = logging.getLogger(__name__)

# Pause after the last arrow/wheel step before the value counts as committed
COMMIT_DELAY_MS: int = 400


class ColorButton(QPushButton):
    """Push button showing a color swatch; opens a color dialog on click."""
    color_committed = Signal(str)

    def __init__(self, title: str, color: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._title = title
        self._color = color
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.clicked.connect(self._pick)
        self.set_color(color)

    def color(self) -> str:
        return self._color

    def set_color(self, color: str) -> None:
        self._color = color
        self.setText(color)
        text = "black" if QColor(color).lightness() > 128 else "white"
        self.setStyleSheet(f"QPushButton {{ background-color: {color}; color: {text}; }}")

    @Slot()
    def _pick(self) -> None:
        chosen = QColorDialog.getColor(QColor(self._color), self, self._title)
        if not chosen.isValid():
            return
        value = chosen.name()
        if value != self._color:
            self.set_color(value)
            self.color_committed.emit(value)


class GalaxyControlPanel(QWidget):
    """
    Top: numeric parameters and colors.
    Below: one button per spin variant, and a reset action.
    """
    parameters_committed = Signal()
    profile_selected = Signal(str)

    def __init__(self, state: GalaxyState, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.state = state

        root = QVBoxLayout(self)

        # --- Parameters ---
        box = QGroupBox("Galaxy", self)
        root.addWidget(box)
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self._row = 0
        self._spins: dict[str, QAbstractSpinBox] = {}
        self._color_buttons: dict[str, ColorButton] = {}

        for key, spec in PARAMETER_SPECS.items():
            self._add_spin(key, spec)
        for key, label in COLOR_LABELS.items():
            self._add_color(key, label)

        # --- Variants ---
        variants = QGroupBox("Spin variations", self)
        root.addWidget(variants)
        v_layout = QVBoxLayout(variants)
        self.variant_group = QButtonGroup(self)
        self.variant_group.setExclusive(True)
        self._variant_buttons: dict[SpinProfileKey, QPushButton] = {}
        for key in list_keys():
            btn = QPushButton(profile_label(key), variants)
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked=False, k=key: self._on_variant_clicked(k))
            self.variant_group.addButton(btn)
            v_layout.addWidget(btn)
            self._variant_buttons[key] = btn

        self.btn_reset = QPushButton("Reset to defaults", self)
        self.btn_reset.clicked.connect(self.on_reset_clicked)
        root.addWidget(self.btn_reset)

        self.lbl_status = QLabel("", self)
        self.lbl_status.setWordWrap(True)
        root.addWidget(self.lbl_status)

        root.addStretch()

        # Debounce for arrow/wheel stepping
        self._pending: set[str] = set()
        self._commit_timer = QTimer(self)
        self._commit_timer.setSingleShot(True)
        self._commit_timer.setInterval(COMMIT_DELAY_MS)
        self._commit_timer.timeout.connect(self.commit_pending)

        self.load_from_state()

    # ------------------------------------------------------------------------------
    # Form builders
    # ------------------------------------------------------------------------------

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_spin(self, key: str, spec: ParameterSpec) -> QAbstractSpinBox:
        row = self._next_row()
        self.grid.addWidget(QLabel(spec.label, self), row, 0)

        if spec.integer:
            w = QSpinBox(self)
            w.setRange(int(spec.min_value), int(spec.max_value))
            w.setSingleStep(int(spec.step))
        else:
            w = QDoubleSpinBox(self)
            w.setRange(spec.min_value, spec.max_value)
            w.setSingleStep(spec.step)
            w.setDecimals(spec.decimals)
        # valueChanged only fires on Enter, focus out or stepping
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        w.valueChanged.connect(lambda _v, k=key: self._on_value_changed(k))
        w.editingFinished.connect(self.commit_pending)

        self.grid.addWidget(w, row, 1)
        self._spins[key] = w
        return w

    def _add_color(self, key: str, label: str) -> ColorButton:
        row = self._next_row()
        self.grid.addWidget(QLabel(label, self), row, 0)
        btn = ColorButton(label, getattr(self.state.parameters, key), self)
        btn.color_committed.connect(lambda value, k=key: self._on_color_committed(k, value))
        self.grid.addWidget(btn, row, 1)
        self._color_buttons[key] = btn
        return btn

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def load_from_state(self) -> None:
        """Update the widgets to match GalaxyState without emitting anything."""
        params = self.state.parameters
        for key, w in self._spins.items():
            w.blockSignals(True)
            w.setValue(getattr(params, key))
            w.blockSignals(False)
        for key, btn in self._color_buttons.items():
            btn.set_color(getattr(params, key))

        btn = self._variant_buttons.get(self.state.profile_key)
        if btn is not None:
            btn.setChecked(True)

    def set_status(self, text: str) -> None:
        self.lbl_status.setText(text)

    @Slot()
    def commit_pending(self) -> None:
        """Write staged edits to the state and emit one commit if anything changed."""
        self._commit_timer.stop()
        if not self._pending:
            return

        changed = False
        for key in sorted(self._pending):
            changed |= self.state.set_parameter(key, self._spins[key].value())
        self._pending.clear()

        # Clamping may have adjusted a value
        self.load_from_state()

        if changed:
            self.parameters_committed.emit()

    @Slot()
    def on_reset_clicked(self) -> None:
        self._pending.clear()
        self._commit_timer.stop()
        self.state.reset()
        self.load_from_state()
        self.parameters_committed.emit()

    # ------------------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------------------

    def _on_value_changed(self, key: str) -> None:
        self._pending.add(key)
        self._commit_timer.start()

    def _on_color_committed(self, key: str, value: str) -> None:
        if self.state.set_parameter(key, value):
            self.parameters_committed.emit()

    def _on_variant_clicked(self, key: SpinProfileKey) -> None:
        # Flush numeric edits first so they are part of this regeneration
        self._commit_timer.stop()
        for k in sorted(self._pending):
            self.state.set_parameter(k, self._spins[k].value())
        self._pending.clear()

        self.state.select_profile(key)
        logger.info(f"Spin variation selected: {profile_label(key)}")
        self.profile_selected.emit(str(key))
