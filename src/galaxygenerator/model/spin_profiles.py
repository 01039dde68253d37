"""
Spin Profiles
=============
A spin profile maps a point's sampled radius and the global spin coefficient
to an extra angle, which twists the branches into spiral arms.

Profiles are plain functions registered under a `SpinProfileKey`. They only use
NumPy ufuncs, so the same function works on a scalar and on the whole radius
array at once.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Callable

import numpy as np

SpinProfile = Callable[[float, float], float]


class SpinProfileKey(StrEnum):
    LINEAR = "linear"
    SINE = "sine"
    COSINE = "cosine"
    COS_SIN_3 = "cos-sin-3"
    SIN_COS_3 = "sin-cos-3"
    COS_SIN_8 = "cos-sin-8"
    SIN_COS_5 = "sin-cos-5"


DEFAULT_PROFILE = SpinProfileKey.SINE

_REGISTRY: dict[SpinProfileKey, SpinProfile] = {}
_LABELS: dict[SpinProfileKey, str] = {}


def register_profile(key: SpinProfileKey, label: str) -> Callable[[SpinProfile], SpinProfile]:
    """Function decorator to register a spin profile under `key`."""
    def decorator(func: SpinProfile) -> SpinProfile:
        if key in _REGISTRY:
            raise ValueError(f"Spin profile '{key}' is already registered")
        _REGISTRY[key] = func
        _LABELS[key] = label
        return func
    return decorator


def get_profile(key: SpinProfileKey | str) -> SpinProfile:
    func = _REGISTRY.get(SpinProfileKey(key))
    if func is None:
        raise KeyError(f"No spin profile registered for key '{key}'")
    return func


def profile_label(key: SpinProfileKey | str) -> str:
    return _LABELS[SpinProfileKey(key)]


def list_keys() -> list[SpinProfileKey]:
    return list(_REGISTRY.keys())


# ------------------------------------------------------------------------------
# Variants
# ------------------------------------------------------------------------------

@register_profile(SpinProfileKey.LINEAR, "First variation")
def linear(radius, spin):
    return radius * spin


@register_profile(SpinProfileKey.SINE, "Second variation")
def sine(radius, spin):
    return np.sin(radius * spin)


@register_profile(SpinProfileKey.COSINE, "Third variation")
def cosine(radius, spin):
    return np.cos(radius * spin)


@register_profile(SpinProfileKey.COS_SIN_3, "Fourth variation")
def cos_of_sine_3(radius, spin):
    return np.cos(np.sin(radius * spin) * 3)


@register_profile(SpinProfileKey.SIN_COS_3, "Fifth variation")
def sin_of_cosine_3(radius, spin):
    return np.sin(np.cos(radius * spin) * 3)


@register_profile(SpinProfileKey.COS_SIN_8, "Sixth variation")
def cos_of_sine_8(radius, spin):
    return np.cos(np.sin(radius * spin) * 8)


@register_profile(SpinProfileKey.SIN_COS_5, "Seventh variation")
def sin_of_cosine_5(radius, spin):
    return np.sin(np.cos(radius * spin) * 5)
