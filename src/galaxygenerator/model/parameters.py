"""
Galaxy Parameters
=================
The generation inputs edited by the control panel.

Classes:
    ParameterSpec: UI metadata (label, bounds, step) of one numeric field.
    GalaxyParameters: The snapshot handed to the generator.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace, fields
from typing import Any

RGB = tuple[float, float, float]

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class ParameterSpec:
    """Range and label of a numeric field as shown in the UI."""
    label: str
    min_value: float
    max_value: float
    step: float
    decimals: int = 3
    integer: bool = False

    def clamp(self, value: float) -> float | int:
        value = min(max(value, self.min_value), self.max_value)
        if self.integer:
            return int(round(value))
        return float(value)


PARAMETER_SPECS: dict[str, ParameterSpec] = {
    "count": ParameterSpec("Number of particles", 100, 1_000_000, 100, decimals=0, integer=True),
    "size": ParameterSpec("Size of the particles", 0.001, 0.1, 0.001),
    "radius": ParameterSpec("Radius of the galaxy", 0.01, 20.0, 0.01, decimals=2),
    "branches": ParameterSpec("Number of branches/lines", 2, 20, 1, decimals=0, integer=True),
    "spin": ParameterSpec("Spin frequency", -5.0, 5.0, 0.001),
    "randomness": ParameterSpec("Randomness", 0.0, 2.0, 0.001),
    "randomness_power": ParameterSpec("Randomness power", 1.0, 10.0, 0.001),
}

COLOR_LABELS: dict[str, str] = {
    "inside_color": "Inside color",
    "outside_color": "Outside color",
}


def hex_to_rgb(value: str) -> RGB:
    """
    Convert '#rrggbb' to an (r, g, b) tuple of floats in [0, 1].

    Raises:
        ValueError: If the string is not a 6-digit hex color.
    """
    match = _HEX_COLOR.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Invalid hex color: {value!r}")
    digits = match.group(1)
    return tuple(int(digits[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


@dataclass
class GalaxyParameters:
    """
    Generation inputs. `size` only affects rendering and is passed through.
    Colors are stored as hex strings, the way the color pickers hand them over.
    """
    count: int = 150_000
    size: float = 0.01
    radius: float = 5.0
    branches: int = 10
    spin: float = 1.0
    randomness: float = 0.2
    randomness_power: float = 7.0
    inside_color: str = "#ff6030"
    outside_color: str = "#1b3984"

    def copy(self) -> GalaxyParameters:
        return replace(self)

    def clamped(self) -> GalaxyParameters:
        """Return a copy with every numeric field clamped to its UI bounds."""
        values = {name: spec.clamp(getattr(self, name)) for name, spec in PARAMETER_SPECS.items()}
        return replace(self, **values)

    def inside_rgb(self) -> RGB:
        return hex_to_rgb(self.inside_color)

    def outside_rgb(self) -> RGB:
        return hex_to_rgb(self.outside_color)

    def as_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
