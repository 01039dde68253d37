from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from galaxygenerator.controller.clock import ManualClock, MonotonicClock
from galaxygenerator.controller.scene import GalaxySceneManager
from galaxygenerator.model.generator import InvalidParameterError
from galaxygenerator.model.parameters import GalaxyParameters
from galaxygenerator.model.spin_profiles import SpinProfileKey, get_profile


class FakeHost:
    """Records scene membership the way the PyVista widget would hold actors."""

    def __init__(self) -> None:
        self.scene: list[object] = []
        self.released: list[object] = []
        self.rotations: dict[int, float] = {}
        self.calls: list[str] = []
        self._next = 0

    def add_to_scene(self, galaxy):
        self._next += 1
        handle = ("actor", self._next)
        self.calls.append("add")
        self.scene.append(handle)
        return handle

    def remove_from_scene(self, handle):
        self.calls.append("remove")
        self.scene.remove(handle)
        self.released.append(handle)

    def set_rotation(self, handle, degrees):
        self.rotations[handle[1]] = degrees


class BrokenRemovalHost(FakeHost):
    def remove_from_scene(self, handle):
        self.calls.append("remove")
        raise RuntimeError("GPU context lost")


@pytest.fixture
def params():
    return GalaxyParameters(count=1_000)


@pytest.fixture
def profile():
    return get_profile(SpinProfileKey.SINE)


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def manager(host):
    return GalaxySceneManager(host, clock=ManualClock(), rng=np.random.default_rng(0))


def test_first_regenerate_installs_one_galaxy(manager, host, params, profile):
    galaxy = manager.regenerate(params, profile)

    assert manager.live is galaxy
    assert galaxy.is_installed
    assert host.scene == [galaxy.handle]
    assert host.calls == ["add"]


def test_regenerating_twice_keeps_exactly_one_live_galaxy(manager, host, params, profile):
    first = manager.regenerate(params, profile)
    first_handle = first.handle
    second = manager.regenerate(params, profile)

    assert manager.live is second
    assert host.scene == [second.handle]
    assert host.released == [first_handle]
    assert not first.is_installed
    # Old one leaves the scene before the new one enters
    assert host.calls == ["add", "remove", "add"]


def test_many_regenerations_do_not_leak(manager, host, params, profile):
    for _ in range(25):
        manager.regenerate(params, profile)

    assert len(host.scene) == 1
    assert len(host.released) == 24


def test_invalid_parameters_leave_the_scene_untouched(manager, host, params, profile):
    live = manager.regenerate(params, profile)
    params.count = -5

    with pytest.raises(InvalidParameterError):
        manager.regenerate(params, profile)

    assert manager.live is live
    assert host.scene == [live.handle]


def test_disposal_failure_is_logged_and_new_galaxy_installed(params, profile, caplog):
    host = BrokenRemovalHost()
    manager = GalaxySceneManager(host, clock=ManualClock(), rng=np.random.default_rng(0))
    manager.regenerate(params, profile)

    with caplog.at_level(logging.ERROR, logger="galaxygenerator"):
        second = manager.regenerate(params, profile)

    assert manager.live is second
    assert second.is_installed
    assert "Failed to dispose" in caplog.text


def test_clear_releases_live_galaxy(manager, host, params, profile):
    galaxy = manager.regenerate(params, profile)
    manager.clear()

    assert manager.live is None
    assert host.scene == []
    assert not galaxy.is_installed
    # Clearing an empty scene is a no-op
    manager.clear()
    assert host.calls == ["add", "remove"]


def test_update_frame_rotates_from_clock(host, params, profile):
    clock = ManualClock()
    manager = GalaxySceneManager(host, clock=clock, rng=np.random.default_rng(0))
    galaxy = manager.regenerate(params, profile)
    positions = galaxy.positions.copy()

    clock.advance(10.0)
    manager.update_frame()

    assert manager.rotation_angle() == pytest.approx(-0.6)
    assert host.rotations[galaxy.handle[1]] == pytest.approx(math.degrees(-0.6))
    np.testing.assert_array_equal(galaxy.positions, positions)


def test_update_frame_without_galaxy_is_noop(manager, host):
    manager.update_frame()
    assert host.rotations == {}


def test_default_clock_is_monotonic(host):
    manager = GalaxySceneManager(host)
    assert isinstance(manager.clock, MonotonicClock)
    assert manager.clock.elapsed() >= 0.0


def test_previous_galaxy_is_disposed_before_new_buffers_are_built(manager, host, params, profile):
    manager.regenerate(params, profile)
    scene_seen_by_generator = []

    def spying_profile(radius, spin):
        scene_seen_by_generator.append(list(host.scene))
        return profile(radius, spin)

    manager.regenerate(params, spying_profile)

    assert scene_seen_by_generator == [[]]
    assert host.calls == ["add", "remove", "add"]


def test_non_finite_spin_profile_leaves_empty_scene(manager, host, params, profile):
    manager.regenerate(params, profile)

    with pytest.raises(InvalidParameterError):
        manager.regenerate(params, lambda radius, spin: np.full_like(radius, np.inf))

    assert manager.live is None
    assert host.scene == []
