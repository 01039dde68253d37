"""
Galaxy Generator
================
Builds the position and color buffers of a spiral point cloud.

Why is this file needed?
------------------------
1. Algorithm: Every point gets a random radius, an arm picked from its index,
   an extra twist from the spin profile and a power-shaped jitter per axis.
2. Colors: Each point blends from the inside to the outside color by its
   relative radius.
3. Validation: Bad inputs are rejected before any buffer is allocated.

Note: This module is pure NumPy and must NOT import PySide6 or PyVista.
"""
from __future__ import annotations

import logging
import math
import numbers
import time
from dataclasses import dataclass, field
from typing import Any, Optional, TYPE_CHECKING

import numpy as np

from galaxygenerator.model.parameters import GalaxyParameters
from galaxygenerator.model.spin_profiles import SpinProfile

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """A generation input that cannot produce well-defined buffers."""


@dataclass(eq=False)
class GeneratedGalaxy:
    """
    The output of one generation run.

    `handle` points to the renderer-owned resources (actor, mapper, dataset).
    It is set by the scene manager on install and cleared on disposal.
    """
    positions: npt.NDArray[np.float32]
    colors: npt.NDArray[np.float32]
    parameters: GalaxyParameters
    profile: SpinProfile
    handle: Optional[Any] = field(default=None, repr=False)

    @property
    def count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def is_installed(self) -> bool:
        return self.handle is not None


# ------------------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class CheckedParameters:
    """Generation inputs after validation, coerced to plain Python numbers."""
    count: int
    branches: int
    radius: float
    spin: float
    randomness: float
    randomness_power: float
    inside: tuple[float, float, float]
    outside: tuple[float, float, float]
    source: GalaxyParameters


def _as_count(name: str, value: Any, minimum: int) -> int:
    """Coerce an integral number to int, rejecting fractions and out-of-range values."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"'{name}' must be a number, got {value!r}")
    try:
        finite = math.isfinite(value)
    except OverflowError as e:
        raise InvalidParameterError(f"'{name}' is out of range, got {value!r}") from e
    if not finite:
        raise InvalidParameterError(f"'{name}' must be finite, got {value!r}")
    if int(value) != value:
        raise InvalidParameterError(f"'{name}' must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidParameterError(f"'{name}' must be >= {minimum}, got {value!r}")
    return int(value)


def _as_real(name: str, value: Any, minimum: Optional[float] = None) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(f"'{name}' must be a number, got {value!r}")
    try:
        real = float(value)
    except OverflowError as e:
        raise InvalidParameterError(f"'{name}' is out of range, got {value!r}") from e
    if not math.isfinite(real):
        raise InvalidParameterError(f"'{name}' must be finite, got {value!r}")
    if minimum is not None and real < minimum:
        raise InvalidParameterError(f"'{name}' must be >= {minimum}, got {value!r}")
    return real


def _as_rgb(name: str, getter) -> tuple[float, float, float]:
    try:
        return getter()
    except (ValueError, AttributeError) as e:
        raise InvalidParameterError(f"'{name}': {e}") from e


def validate_parameters(params: GalaxyParameters) -> CheckedParameters:
    """
    Check every generation input without allocating anything.

    Raises:
        InvalidParameterError: If any input is NaN, infinite, too large to be
            represented, negative where it must not be, or fractional where it
            must be integral.
    """
    _as_real("size", params.size, minimum=0.0)
    return CheckedParameters(
        count=_as_count("count", params.count, minimum=0),
        branches=_as_count("branches", params.branches, minimum=1),
        radius=_as_real("radius", params.radius, minimum=0.0),
        spin=_as_real("spin", params.spin),
        randomness=_as_real("randomness", params.randomness, minimum=0.0),
        randomness_power=_as_real("randomness_power", params.randomness_power, minimum=0.0),
        inside=_as_rgb("inside_color", params.inside_rgb),
        outside=_as_rgb("outside_color", params.outside_rgb),
        source=params.copy(),
    )


# ------------------------------------------------------------------------------
# Generation
# ------------------------------------------------------------------------------

def branch_angles(count: int, branches: int) -> npt.NDArray[np.float64]:
    """Angle of the arm each point belongs to. Point i sits on arm i mod branches."""
    index = np.arange(count)
    return (index % branches) / branches * 2.0 * np.pi


def spin_angles(
    spin_profile: SpinProfile,
    radius: npt.NDArray[np.float64],
    spin: float,
) -> npt.NDArray[np.float64]:
    """
    Evaluate `spin_profile` for every radius.

    The profile is first called with the whole array. Profiles that only
    accept a scalar radius (math functions, branching on the radius) are
    evaluated point by point instead.

    Raises:
        InvalidParameterError: If the profile produces non-finite angles.
    """
    try:
        result = np.asarray(spin_profile(radius, spin), dtype=np.float64)
        result = np.broadcast_to(result, radius.shape)
    except (TypeError, ValueError):
        logger.debug("Spin profile is not vectorized, evaluating per point")
        result = np.vectorize(spin_profile, otypes=[np.float64])(radius, spin)

    if not np.all(np.isfinite(result)):
        raise InvalidParameterError("Spin profile returned non-finite angles")
    return result


def build_galaxy(
    checked: CheckedParameters,
    spin_profile: SpinProfile,
    rng: Optional[np.random.Generator] = None,
) -> GeneratedGalaxy:
    """
    Allocate and fill the buffers for already validated inputs.

    Raises:
        InvalidParameterError: If the spin profile produces non-finite angles.
    """
    if rng is None:
        rng = np.random.default_rng()

    count = checked.count
    max_radius = checked.radius
    inside = np.asarray(checked.inside, dtype=np.float64)
    outside = np.asarray(checked.outside, dtype=np.float64)

    started = time.perf_counter()

    # 1. Radius
    radius = rng.random(count) * max_radius

    # 2. Arm and twist
    angle = branch_angles(count, checked.branches) + spin_angles(spin_profile, radius, checked.spin)

    # 3. Jitter, one independent magnitude and sign per axis per point
    magnitude = rng.random((count, 3)) ** checked.randomness_power * checked.randomness
    sign = np.where(rng.random((count, 3)) < 0.5, 1.0, -1.0)
    jitter = sign * magnitude

    positions = np.empty((count, 3), dtype=np.float32)
    positions[:, 0] = np.cos(angle) * radius + jitter[:, 0]
    positions[:, 1] = jitter[:, 1]
    positions[:, 2] = np.sin(angle) * radius + jitter[:, 2]

    # 4. Color gradient, t = 0 everywhere for a zero-radius galaxy
    if max_radius > 0.0:
        t = np.clip(radius / max_radius, 0.0, 1.0)
    else:
        t = np.zeros(count, dtype=np.float64)
    colors = (inside + (outside - inside) * t[:, np.newaxis]).astype(np.float32)

    elapsed = time.perf_counter() - started
    logger.info(
        f"Generated {count} points ({checked.branches} branches, "
        f"profile '{getattr(spin_profile, '__name__', spin_profile)}') in {elapsed * 1000.0:.1f} ms"
    )

    return GeneratedGalaxy(
        positions=positions,
        colors=colors,
        parameters=checked.source,
        profile=spin_profile,
    )


def generate_galaxy(
    params: GalaxyParameters,
    spin_profile: SpinProfile,
    rng: Optional[np.random.Generator] = None,
) -> GeneratedGalaxy:
    """
    Compute positions and colors for `params.count` points.

    Args:
        params: Snapshot of the generation inputs. Not modified.
        spin_profile: Function (radius, spin) -> angle. Vectorized profiles
            get the whole radius array; scalar ones are called per point.
        rng: Random generator. Pass a seeded one for reproducible output.

    Returns:
        A GeneratedGalaxy with (count, 3) float32 position and color arrays.

    Raises:
        InvalidParameterError: If any input fails `validate_parameters`, or if
            the spin profile produces non-finite angles.
    """
    return build_galaxy(validate_parameters(params), spin_profile, rng=rng)
