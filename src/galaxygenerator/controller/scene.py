"""
Galaxy Scene Manager
====================
The single owner of the galaxy currently shown in the scene.

Why is this file needed?
------------------------
1. Lifecycle: Regenerating replaces the previous point cloud. The old
   renderer resources are released and removed from the scene before the new
   buffers are allocated, so the scene never holds more than one galaxy.
2. Animation: Each frame the live galaxy is rotated around the vertical axis
   from the injected clock.

Classes:
    SceneHost: What a renderer must provide.
    GalaxySceneManager: Dispose-then-install owner of the live galaxy.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Optional, Protocol

import numpy as np

from galaxygenerator.config import ROTATION_SPEED
from galaxygenerator.controller.clock import Clock, MonotonicClock
from galaxygenerator.model.generator import GeneratedGalaxy, build_galaxy, validate_parameters
from galaxygenerator.model.parameters import GalaxyParameters
from galaxygenerator.model.spin_profiles import SpinProfile

logger = logging.getLogger(__name__)


class SceneHost(Protocol):
    def add_to_scene(self, galaxy: GeneratedGalaxy) -> Any:
        """Create renderer resources for `galaxy` and show them. Returns a handle."""
        ...

    def remove_from_scene(self, handle: Any) -> None:
        """Hide and release the resources behind `handle`."""
        ...

    def set_rotation(self, handle: Any, degrees: float) -> None:
        """Rotate the object behind `handle` around the vertical (y) axis."""
        ...


class GalaxySceneManager:
    def __init__(
        self,
        host: SceneHost,
        clock: Optional[Clock] = None,
        rng: Optional[np.random.Generator] = None,
        rotation_speed: float = ROTATION_SPEED,
    ) -> None:
        self.host = host
        self.clock: Clock = clock if clock is not None else MonotonicClock()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.rotation_speed = rotation_speed
        self._live: Optional[GeneratedGalaxy] = None

    @property
    def live(self) -> Optional[GeneratedGalaxy]:
        return self._live

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def regenerate(self, params: GalaxyParameters, profile: SpinProfile) -> GeneratedGalaxy:
        """
        Generate a new galaxy and make it the live one.

        Parameters are validated first, so invalid input leaves the current
        galaxy untouched. The previous galaxy is then disposed before the new
        buffers are allocated, and the new one is installed.

        Raises:
            InvalidParameterError: From validation, with the scene unchanged.
                Also raised when the spin profile yields non-finite angles, in
                which case the scene is left empty.
        """
        checked = validate_parameters(params)
        self._dispose_live()
        galaxy = build_galaxy(checked, profile, rng=self.rng)
        self._install(galaxy)
        return galaxy

    def clear(self) -> None:
        """Release the live galaxy, e.g. on shutdown."""
        self._dispose_live()

    def rotation_angle(self) -> float:
        """Current rotation around the vertical axis, in radians."""
        return -self.clock.elapsed() * self.rotation_speed

    def update_frame(self) -> None:
        """Per-frame hook: spin the live galaxy. Does not modify its buffers."""
        galaxy = self._live
        if galaxy is None or galaxy.handle is None:
            return
        self.host.set_rotation(galaxy.handle, math.degrees(self.rotation_angle()))

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _dispose_live(self) -> None:
        galaxy = self._live
        if galaxy is None:
            return
        self._live = None
        handle, galaxy.handle = galaxy.handle, None
        if handle is None:
            return
        try:
            self.host.remove_from_scene(handle)
            logger.debug(f"Disposed galaxy with {galaxy.count} points")
        except Exception as e:
            # Installation of the new galaxy proceeds regardless
            logger.exception(f"Failed to dispose previous galaxy: {e}")

    def _install(self, galaxy: GeneratedGalaxy) -> None:
        galaxy.handle = self.host.add_to_scene(galaxy)
        self._live = galaxy
        if galaxy.handle is not None:
            self.host.set_rotation(galaxy.handle, math.degrees(self.rotation_angle()))
