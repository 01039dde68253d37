"""
Galaxy State (Data Model)
=========================
The central data structure for the running application.

Why is this file needed?
------------------------
1. State Management: It holds the current parameters and the selected spin
   profile in one place.
2. Decoupling: The control panel writes to this object; the scene manager
   reads a snapshot of it when regenerating.

Classes:
    GalaxyState: The main container class.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from galaxygenerator.model.parameters import GalaxyParameters, PARAMETER_SPECS, COLOR_LABELS, hex_to_rgb
from galaxygenerator.model.spin_profiles import SpinProfile, SpinProfileKey, DEFAULT_PROFILE, get_profile

logger = logging.getLogger(__name__)


@dataclass
class GalaxyState:
    """
    Holds the parameters being edited and the last used spin profile.
    Pass this instance to the panels and to the main window.
    """
    parameters: GalaxyParameters = field(default_factory=GalaxyParameters)
    profile_key: SpinProfileKey = DEFAULT_PROFILE

    @property
    def profile(self) -> SpinProfile:
        return get_profile(self.profile_key)

    def snapshot(self) -> tuple[GalaxyParameters, SpinProfile]:
        """Copy of the parameters plus the active profile, safe to hand to the generator."""
        return self.parameters.copy(), self.profile

    def set_parameter(self, name: str, value: Any) -> bool:
        """
        Write one field, clamping numeric values to their UI bounds.

        Returns:
            True if the stored value changed.

        Raises:
            KeyError: If `name` is not a parameter.
            ValueError: If a color is not a valid hex string.
        """
        if name in PARAMETER_SPECS:
            value = PARAMETER_SPECS[name].clamp(value)
        elif name in COLOR_LABELS:
            hex_to_rgb(value)
        else:
            raise KeyError(f"Unknown parameter '{name}'")

        if getattr(self.parameters, name) == value:
            return False
        setattr(self.parameters, name, value)
        logger.debug(f"Parameter '{name}' set to {value!r}")
        return True

    def select_profile(self, key: SpinProfileKey | str) -> SpinProfile:
        """Make `key` the active profile; it stays active across parameter edits."""
        profile = get_profile(key)
        self.profile_key = SpinProfileKey(key)
        logger.debug(f"Spin profile '{self.profile_key}' selected")
        return profile

    def reset(self) -> None:
        """Restore the default parameters and profile."""
        self.parameters = GalaxyParameters()
        self.profile_key = DEFAULT_PROFILE
        logger.info("Galaxy state has been reset.")
