"""
3D Visualization Widget (PyVista Wrapper)
Renders the live galaxy as a cloud of glowing point sprites.
"""

from __future__ import annotations

import logging
from typing import Optional

import pyvista as pv

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor
from vtkmodules.vtkRenderingCore import vtkSkybox

from galaxygenerator.config import CAMERA_POSITION, CAMERA_VIEW_ANGLE, CAMERA_CLIPPING_RANGE
from galaxygenerator.model.generator import GeneratedGalaxy
from galaxygenerator.view.assets import load_environment_map

logger = logging.getLogger(__name__)


class PyVistaWidget(QWidget):
    """
    Viewport hosting at most one galaxy point cloud.

    Implements the scene host used by GalaxySceneManager:
    `add_to_scene`, `remove_from_scene` and `set_rotation`.
    """
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._skybox: Optional[vtkSkybox] = None

        self._init_plotter()
        self._init_environment()

    # ------------------------------------------------------------------------------
    # Scene host API
    # ------------------------------------------------------------------------------

    def add_to_scene(self, galaxy: GeneratedGalaxy) -> Optional[pv.Actor]:
        """Build the point cloud for `galaxy` and add it to the renderer. Empty galaxies get no actor."""
        if galaxy.count == 0:
            return None

        cloud = pv.PolyData(galaxy.positions)
        cloud.point_data["rgb"] = galaxy.colors

        actor = self.plotter.add_mesh(
            cloud,
            scalars="rgb",
            rgb=True,
            style="points_gaussian",
            emissive=True,
            render_points_as_spheres=False,
            pickable=False,
            show_scalar_bar=False,
            reset_camera=False,
        )
        actor.mapper.scale_factor = galaxy.parameters.size
        logger.debug(f"Added point cloud with {cloud.n_points} points to the scene.")
        return actor

    def remove_from_scene(self, handle: pv.Actor) -> None:
        """Remove the actor and release its GPU and CPU resources."""
        self.plotter.remove_actor(handle, reset_camera=False, render=False)
        handle.ReleaseGraphicsResources(self.plotter.render_window)
        handle.GetMapper().RemoveAllInputs()

    def set_rotation(self, handle: pv.Actor, degrees: float) -> None:
        handle.orientation = (0.0, degrees, 0.0)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def render(self) -> None:
        self.plotter.render()

    def reset_camera(self) -> None:
        """Back to the initial viewpoint, looking at the galaxy centre."""
        self.plotter.camera_position = [CAMERA_POSITION, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
        self.plotter.camera.view_angle = CAMERA_VIEW_ANGLE
        self.plotter.camera.clipping_range = CAMERA_CLIPPING_RANGE
        self.plotter.render()

    # ------------------------------------------------------------------------------
    # Internal: Setup
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background("black")
        self.plotter.enable_trackball_style()
        self.reset_camera()

    def _init_environment(self) -> None:
        """Use the HDR map as sky and lighting. Without it the background stays black."""
        texture = load_environment_map()
        if texture is None:
            return

        try:
            skybox = vtkSkybox()
            skybox.SetProjectionToSphere()
            skybox.SetTexture(texture)
            self.plotter.add_actor(skybox, reset_camera=False, pickable=False)
            self.plotter.set_environment_texture(texture, is_srgb=False)
            self._skybox = skybox
        except Exception as e:
            logger.warning(f"Environment map could not be applied: {e}")

    def closeEvent(self, event: QCloseEvent) -> None:
        self.plotter.close()
        event.accept()
