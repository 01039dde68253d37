"""
Main Application Window
=======================
The primary GUI container that holds the menu bar, the control panel and the
3D viewport.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects panel commits and variant selection to the scene
   manager, and drives the per-frame rotation.
"""
import logging
from typing import Optional

import numpy as np

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QSplitter, QMessageBox
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QCloseEvent

from galaxygenerator.config import FRAME_INTERVAL_MS
from galaxygenerator.controller.clock import Clock
from galaxygenerator.controller.scene import GalaxySceneManager
from galaxygenerator.model.generator import InvalidParameterError
from galaxygenerator.model.spin_profiles import profile_label
from galaxygenerator.model.state import GalaxyState
from galaxygenerator.view.widgets.control_panel import GalaxyControlPanel
from galaxygenerator.view.widgets.plot_3d import PyVistaWidget

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Galaxy Generator"


class MainWindow(QMainWindow):
    def __init__(
        self,
        state: GalaxyState,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        super().__init__()
        self.state: GalaxyState = state

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QHBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter)

        # --- LEFT SIDE: Controls ---
        self.control_panel = GalaxyControlPanel(self.state)
        splitter.addWidget(self.control_panel)

        # --- RIGHT SIDE: 3D Visualization ---
        self.visualizer = PyVistaWidget()
        splitter.addWidget(self.visualizer)
        splitter.setSizes([350, 1050])

        # --- SCENE OWNER ---
        self.scene = GalaxySceneManager(host=self.visualizer, clock=clock, rng=rng)

        # --- SIGNAL CONNECTIONS ---
        self.control_panel.parameters_committed.connect(self.regenerate)
        self.control_panel.profile_selected.connect(self.regenerate)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- FRAME LOOP ---
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self.on_frame)

        # Initial galaxy
        self.regenerate()
        self._frame_timer.start()

    def _create_actions(self) -> None:
        self.act_reset = QAction("Reset Parameters", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.control_panel.on_reset_clicked)

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

        self.act_reset_camera = QAction("Reset Camera", self)
        self.act_reset_camera.triggered.connect(self.visualizer.reset_camera)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_reset)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.act_reset_camera)

    # --- SLOTS ---

    def regenerate(self, *_args) -> None:
        """Rebuild the galaxy from the current state. Invalid input keeps the old one."""
        params, profile = self.state.snapshot()
        try:
            galaxy = self.scene.regenerate(params, profile)
        except InvalidParameterError as e:
            logger.error(f"Galaxy generation rejected: {e}")
            QMessageBox.warning(self, "Invalid parameters", str(e))
            return

        self.control_panel.set_status(
            f"{galaxy.count:,} points - {profile_label(self.state.profile_key)}"
        )
        self.visualizer.render()

    def on_frame(self) -> None:
        self.scene.update_frame()
        self.visualizer.render()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._frame_timer.stop()
        self.scene.clear()

        if self.visualizer and self.visualizer.plotter:
            self.visualizer.plotter.close()

        event.accept()
